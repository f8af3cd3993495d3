import logging

import pytest
from fastapi.testclient import TestClient

from storyteller.app import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def fake_story(monkeypatch, story_text):
    calls = []

    async def _generate_story_text(req):
        calls.append(req)
        return story_text

    monkeypatch.setattr("storyteller.orchestrator.generate_story_text", _generate_story_text)
    return calls


@pytest.fixture
def fake_images(monkeypatch):
    prompts = []

    async def _request_illustration(prompt):
        prompts.append(prompt)
        return f"https://images.example/{len(prompts)}.png"

    monkeypatch.setattr("storyteller.illustrator.request_illustration", _request_illustration)
    return prompts


def test_health(client):
    for path in ("/health", "/api/health"):
        response = client.get(path)
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


def test_generate_story(client, no_stagger, fake_story, fake_images):
    response = client.post(
        "/api/generate-story",
        json={
            "prompt": "A fox who wants to see the sea",
            "language": "Japanese (Japan)",
            "voiceName": "ja-JP-Standard-A",
            "animationStyle": "Studio Ghibli",
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Once upon a time a little fox lived in a quiet forest"
    assert body["language"] == "Japanese (Japan)"
    assert body["ttsVoiceName"] == "ja-JP-Standard-A"
    assert body["animationStyle"] == "Studio Ghibli"
    assert [f["id"] for f in body["frames"]] == [1, 2, 3, 4, 5]
    assert body["frames"][0]["text"].startswith("Once upon a time")
    assert all(f["imageURL"].startswith("https://images.example/") for f in body["frames"])
    assert len(fake_images) == 5
    assert all(p.startswith("Studio Ghibli anime style") for p in fake_images)


def test_generate_story_defaults(client, no_stagger, fake_story, fake_images):
    response = client.post("/api/generate-story", json={"text": "A brave little fox"})

    assert response.status_code == 200
    body = response.json()
    assert body["language"] == "English (US)"
    assert body["ttsVoiceName"] == "en-US-Standard-C"
    assert body["animationStyle"] == "Disney/Pixar 3D Animation"
    assert fake_story[0].prompt == "A brave little fox"


@pytest.mark.parametrize("payload", [{"prompt": "", "text": "A fox"}, {"prompt": None, "text": "A fox"}])
def test_generate_story_falls_back_to_text(client, no_stagger, fake_story, fake_images, payload):
    response = client.post("/api/generate-story", json=payload)

    assert response.status_code == 200
    assert fake_story[0].prompt == "A fox"


def test_generate_story_with_failed_frame(client, no_stagger, fake_story, monkeypatch):
    count = {"n": 0}

    async def _request_illustration(prompt):
        if "rested by the lake" in prompt:
            raise RuntimeError("upstream 500")
        count["n"] += 1
        return "https://images.example/ok.png"

    monkeypatch.setattr("storyteller.illustrator.request_illustration", _request_illustration)

    response = client.post("/api/generate-story", json={"prompt": "A fox"})

    assert response.status_code == 200
    frames = response.json()["frames"]
    assert len(frames) == 5
    assert frames[4]["imageURL"].startswith("https://placehold.co/1024x1024/4DD0E1/")
    assert [f["imageURL"] for f in frames[:4]] == ["https://images.example/ok.png"] * 4
    assert count["n"] == 4


@pytest.mark.parametrize("payload", [{}, {"prompt": ""}, {"prompt": "   "}, {"prompt": None}])
def test_generate_story_requires_prompt(client, fake_story, payload):
    response = client.post("/api/generate-story", json=payload)
    assert response.status_code == 400
    assert fake_story == []


def test_generate_story_with_no_frames_is_an_error(client, no_stagger, monkeypatch, fake_images):
    async def _generate_story_text(req):
        return "\n\n   \n\n"

    monkeypatch.setattr("storyteller.orchestrator.generate_story_text", _generate_story_text)

    response = client.post("/api/generate-story", json={"prompt": "A lonely lighthouse"})

    assert response.status_code == 502
    assert fake_images == []


def test_generate_story_upstream_failure(client, monkeypatch, fake_images, caplog):
    async def _generate_story_text(req):
        raise RuntimeError("OpenAI is down")

    monkeypatch.setattr("storyteller.orchestrator.generate_story_text", _generate_story_text)

    with caplog.at_level(logging.ERROR):
        response = client.post("/api/generate-story", json={"prompt": "A lonely lighthouse"})

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to generate story"
    assert fake_images == []
    assert "OpenAI is down" in caplog.text


def test_generate_image_success_is_bare_string(client, fake_images):
    response = client.post("/api/generate-image", json={"prompt": "A fox in the forest", "animationStyle": "Claymation"})

    assert response.status_code == 200
    assert response.json() == "https://images.example/1.png"
    assert fake_images[0].startswith("Claymation stop-motion style")


def test_generate_image_fallback_shape(client, monkeypatch):
    async def _request_illustration(prompt):
        raise RuntimeError("billing")

    monkeypatch.setattr("storyteller.illustrator.request_illustration", _request_illustration)

    response = client.post("/api/generate-image", json={"prompt": "Clouds over the hills"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is False
    assert body["imageUrl"].startswith("https://placehold.co/1024x1024/64B5F6/")
    assert body["message"]


def test_generate_image_requires_prompt(client, fake_images):
    response = client.post("/api/generate-image", json={"prompt": ""})
    assert response.status_code == 400
    assert fake_images == []
