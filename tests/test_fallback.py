import pytest

from storyteller.fallback import SCENE_COLORS, fallback_image_url
from storyteller.models import SceneType


@pytest.mark.parametrize(
    "scene, color",
    [
        (SceneType.FOREST, "8BC34A"),
        (SceneType.SKY, "64B5F6"),
        (SceneType.TOWN, "E57373"),
        (SceneType.HOME, "FFB74D"),
        (SceneType.WATER, "4DD0E1"),
        (SceneType.MAGICAL_LANDSCAPE, "9C89B8"),
    ],
)
def test_fallback_color_per_scene(scene, color):
    url = fallback_image_url("Some story text", scene, 0)
    assert f"/1024x1024/{color}/FFFFFF?" in url


def test_color_table_covers_every_scene():
    assert set(SCENE_COLORS) == set(SceneType)


def test_fallback_url_format():
    url = fallback_image_url("A fox naps under a tree.", SceneType.FOREST, 0)
    assert url == "https://placehold.co/1024x1024/8BC34A/FFFFFF?text=Ghibli+Forest:+A%20fox%20naps%20under%20a%20tree."


def test_fallback_title_for_default_scene():
    url = fallback_image_url("A dragon sang.", SceneType.MAGICAL_LANDSCAPE, 0)
    assert "text=Ghibli+Magical+landscape:+A%20dragon%20sang." in url


def test_fallback_snippet_is_truncated_and_trimmed():
    text = "word " * 30
    url = fallback_image_url(text, SceneType.SKY, 3)
    snippet = url.split(":+", 1)[1]
    assert snippet == ("word%20" * 11) + "word"


def test_fallback_snippet_is_percent_encoded():
    url = fallback_image_url("Ñandú & friends? 100%/yes #1", SceneType.TOWN, 0)
    snippet = url.split(":+", 1)[1]
    assert snippet == "%C3%91and%C3%BA%20%26%20friends%3F%20100%25%2Fyes%20%231"


def test_fallback_for_empty_text_uses_frame_number():
    url = fallback_image_url("", SceneType.MAGICAL_LANDSCAPE, 4)
    assert url.endswith(":+Story%20Scene%205")


def test_fallback_is_deterministic():
    assert fallback_image_url("Same", SceneType.WATER, 1) == fallback_image_url("Same", SceneType.WATER, 1)
