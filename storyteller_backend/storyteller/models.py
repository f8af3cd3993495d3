from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import List, Optional

from .settings import DEFAULT_LANGUAGE, DEFAULT_VOICE_NAME, DEFAULT_ANIMATION_STYLE


class SceneType(str, Enum):
    FOREST = "forest"
    SKY = "sky"
    TOWN = "town"
    HOME = "home"
    WATER = "water"
    MAGICAL_LANDSCAPE = "magical landscape"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class StoryRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    prompt: str = ""
    language: str = DEFAULT_LANGUAGE
    voice_name: str = Field(DEFAULT_VOICE_NAME, alias="voiceName")
    animation_style: str = Field(DEFAULT_ANIMATION_STYLE, alias="animationStyle")

    @model_validator(mode="before")
    @classmethod
    def _prompt_or_text(cls, data):
        # "text" is accepted in place of an empty or missing "prompt"
        if isinstance(data, dict):
            data = {**data, "prompt": data.get("prompt") or data.get("text") or ""}
            data.pop("text", None)
        return data

    @field_validator("language", "voice_name", "animation_style", mode="before")
    @classmethod
    def _blank_means_default(cls, v, info):
        if v is None or (isinstance(v, str) and not v.strip()):
            return cls.model_fields[info.field_name].default
        return v


class ImageRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    prompt: str = ""
    language: str = DEFAULT_LANGUAGE
    animation_style: str = Field(DEFAULT_ANIMATION_STYLE, alias="animationStyle")

    @field_validator("prompt", mode="before")
    @classmethod
    def _prompt_or_empty(cls, v):
        return v or ""

    @field_validator("language", "animation_style", mode="before")
    @classmethod
    def _blank_means_default(cls, v, info):
        if v is None or (isinstance(v, str) and not v.strip()):
            return cls.model_fields[info.field_name].default
        return v


class StoryFrame(BaseModel):
    index: int = Field(ge=0)
    text: str
    image_url: Optional[str] = None


class IllustrationOutcome(BaseModel):
    index: int
    image_url: str
    # None when the illustration service produced the image
    fallback_reason: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.fallback_reason is not None


class AnimationStyleProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_style: str
    character_style: str


class CulturalProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    nature: str
    sky: str
    architecture: str
    buildings: str
    interior: str
    decor: str
    water: str
    landscape: str
    features: str
    cultural: str


class FramePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    text: str
    image_url: Optional[str] = Field(None, alias="imageURL")


class StoryResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    frames: List[FramePayload]
    language: str
    tts_voice_name: str = Field(alias="ttsVoiceName")
    animation_style: str = Field(alias="animationStyle")


class ImageFallbackResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_url: str = Field(alias="imageUrl")
    success: bool = False
    message: str


class OrchestrationState(BaseModel):
    request: StoryRequest
    story_text: Optional[str] = None
    frames: List[StoryFrame] = Field(default_factory=list)
    outcomes: List[IllustrationOutcome] = Field(default_factory=list)
    story: Optional[StoryResponse] = None
