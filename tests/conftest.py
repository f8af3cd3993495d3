import os
import sys

import pytest

# Add the backend to the path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "storyteller_backend")))


STORY_TEXT = (
    "1. Once upon a time a little fox lived in a quiet forest. She loved the tall trees.\n\n"
    "2. One day she saw a bright bird soaring across the sky.\n\n"
    "3. The path led her to a busy village market full of colors.\n\n"
    "4. Inside a warm kitchen, a kind baker gave them bread.\n\n"
    "5. At sunset they rested by the lake and watched the stars appear."
)


@pytest.fixture
def story_text():
    return STORY_TEXT


@pytest.fixture
def no_stagger(monkeypatch):
    monkeypatch.setattr("storyteller.illustrator.IMAGE_STAGGER_MS", 0)
