import re
from typing import List

from .models import StoryFrame

_PARAGRAPH_BREAK = re.compile(r"\r?\n[ \t]*\r?\n")
_ORDINAL_PREFIX = re.compile(r"^\d+[.)]\s*")
_DEFAULT_TITLE = "Magical Story"


def segment(story_text: str) -> List[StoryFrame]:
    """Split generated story text into frames, one per blank-line separated paragraph.

    Leading ordinals such as "1." or "2)" are stripped and empty paragraphs are
    dropped. Indices are assigned in order starting at 0.
    """
    frames = []
    for chunk in _PARAGRAPH_BREAK.split(story_text or ""):
        text = _ORDINAL_PREFIX.sub("", chunk.strip()).strip()
        if text:
            frames.append(StoryFrame(index=len(frames), text=text))
    return frames


def strip_frame_label(text: str, index: int) -> str:
    label = f"Frame {index + 1}:"
    if text.startswith(label):
        return text[len(label):].strip()
    return text


def derive_title(frames: List[StoryFrame]) -> str:
    if not frames:
        return _DEFAULT_TITLE
    return frames[0].text.split(".")[0].strip() or _DEFAULT_TITLE
