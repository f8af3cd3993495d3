from .models import CulturalProfile, SceneType
from .registry import culture_profile, style_profile
from .scenes import classify

ATMOSPHERE_STYLE = "soft color palette, diffused lighting, magical atmosphere, painterly quality"

# (scene type fragments, background template); first match wins, last entry is the default
BACKGROUND_TEMPLATES = (
    (("forest", "nature"), "lush detailed forest background with {c.nature} elements, magical vegetation"),
    (("sky", "flying"), "expansive cloud-filled sky, {c.sky} features, distant views"),
    (("town", "village"), "charming {c.architecture} inspired village, {c.buildings} details"),
    (("home", "inside"), "cozy {c.interior} interior, {c.decor} elements, warm lighting"),
    (("water", "ocean", "sea"), "shimmering water reflections, {c.water} elements, gentle waves"),
    ((), "{c.landscape} landscape, {c.features} features"),
)


def background_style(scene: SceneType, culture: CulturalProfile) -> str:
    for fragments, template in BACKGROUND_TEMPLATES:
        if not fragments or any(f in scene.value for f in fragments):
            return template.format(c=culture)
    raise AssertionError("background templates must end with a catch-all entry")


def compose_prompt(frame_text: str, style_id: str, language_name: str) -> str:
    scene = classify(frame_text)
    style = style_profile(style_id)
    culture = culture_profile(language_name)
    background = background_style(scene, culture)
    return (
        f"{style.base_style}, {style.character_style}, {background}, {ATMOSPHERE_STYLE}, "
        f"child-friendly magical scene with {culture.cultural} elements: {frame_text}"
    )
