from urllib.parse import quote

from .models import SceneType
from .settings import IMAGE_SIZE, PLACEHOLDER_BASE_URL

SCENE_COLORS = {
    SceneType.FOREST: "8BC34A",  # green
    SceneType.SKY: "64B5F6",  # blue
    SceneType.TOWN: "E57373",  # red/pink
    SceneType.HOME: "FFB74D",  # orange
    SceneType.WATER: "4DD0E1",  # cyan
    SceneType.MAGICAL_LANDSCAPE: "9C89B8",  # purple
}
TEXT_COLOR = "FFFFFF"
SNIPPET_LENGTH = 60


def _encode(text: str) -> str:
    # Same escaping as JavaScript's encodeURIComponent
    return quote(text, safe="-_.!~*'()")


def fallback_image_url(frame_text: str, scene: SceneType, frame_index: int) -> str:
    """Placeholder image URL for a frame that could not be illustrated.

    No network call is made; the same inputs always produce the same URL.
    """
    color = SCENE_COLORS.get(scene, SCENE_COLORS[SceneType.MAGICAL_LANDSCAPE])
    title = _encode(scene.label).replace("%20", "+")
    snippet = (frame_text or "")[:SNIPPET_LENGTH].strip() or f"Story Scene {frame_index + 1}"
    return f"{PLACEHOLDER_BASE_URL}/{IMAGE_SIZE}/{color}/{TEXT_COLOR}?text=Ghibli+{title}:+{_encode(snippet)}"
