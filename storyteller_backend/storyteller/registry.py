"""
Read-only lookup tables for animation styles, cultural scenery and story languages.

The tables live in data/*.json and are loaded once at import. Every lookup is
total: unknown keys resolve to the table's default entry.
"""
import json
import logging
from importlib import resources
from types import MappingProxyType
from typing import Mapping, Tuple

from .models import AnimationStyleProfile, CulturalProfile

logger = logging.getLogger(__name__)


def _load(name: str) -> dict:
    with resources.files(__package__).joinpath("data", name).open("r", encoding="utf-8") as f:
        return json.load(f)


def _load_styles() -> Tuple[Mapping[str, AnimationStyleProfile], AnimationStyleProfile]:
    raw = _load("styles.json")
    table = {}
    for entry in raw["styles"]:
        profile = AnimationStyleProfile(base_style=entry["base_style"], character_style=entry["character_style"])
        for name in entry["names"]:
            table[name] = profile
    return MappingProxyType(table), AnimationStyleProfile.model_validate(raw["default"])


def _load_cultures() -> Tuple[Mapping[str, CulturalProfile], CulturalProfile]:
    raw = _load("cultures.json")
    table = {name: CulturalProfile.model_validate(body) for name, body in raw["cultures"].items()}
    return MappingProxyType(table), CulturalProfile.model_validate(raw["default"])


def _load_languages() -> Tuple[Mapping[str, str], str]:
    raw = _load("languages.json")
    return MappingProxyType(dict(raw["languages"])), raw["default"]


STYLE_PROFILES, DEFAULT_STYLE_PROFILE = _load_styles()
CULTURAL_PROFILES, DEFAULT_CULTURAL_PROFILE = _load_cultures()
LANGUAGE_CODES, DEFAULT_LANGUAGE_CODE = _load_languages()


def style_profile(style_id: str) -> AnimationStyleProfile:
    return STYLE_PROFILES.get(style_id, DEFAULT_STYLE_PROFILE)


def culture_profile(language_name: str) -> CulturalProfile:
    return CULTURAL_PROFILES.get(language_name, DEFAULT_CULTURAL_PROFILE)


def language_code(language_name: str) -> str:
    """Language the story should be written in, e.g. 'English (UK)' -> 'English'."""
    code = LANGUAGE_CODES.get(language_name)
    if code is None:
        logger.warning(f"Language '{language_name}' not found in mapping, defaulting to {DEFAULT_LANGUAGE_CODE}")
        return DEFAULT_LANGUAGE_CODE
    return code
