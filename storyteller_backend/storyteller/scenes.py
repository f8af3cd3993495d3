import re
from typing import Tuple

from .models import SceneType

# Checked in order; the first category with a matching keyword wins.
# Keywords match anywhere in the lowercased text, including inside longer words.
SCENE_KEYWORDS: Tuple[Tuple[SceneType, Tuple[str, ...]], ...] = (
    (SceneType.FOREST, ("forest", "tree", "wood", "garden", "plant", "flower", "leaf", "grass", "bush")),
    (SceneType.SKY, ("sky", "cloud", "fly", "float", "bird", "wind", "air", "soar", "glide")),
    (SceneType.TOWN, ("town", "village", "city", "street", "shop", "market", "building", "house", "home")),
    (SceneType.HOME, ("inside", "room", "kitchen", "bedroom", "home", "house", "interior", "indoors", "living")),
    (SceneType.WATER, ("water", "sea", "ocean", "lake", "river", "stream", "pond", "beach", "shore", "swim", "boat")),
)

_SCENE_PATTERNS = tuple(
    (scene, re.compile("|".join(re.escape(k) for k in keywords)))
    for scene, keywords in SCENE_KEYWORDS
)


def classify(text: str) -> SceneType:
    lowered = (text or "").lower()
    for scene, pattern in _SCENE_PATTERNS:
        if pattern.search(lowered):
            return scene
    return SceneType.MAGICAL_LANDSCAPE
