#!/usr/bin/env python3
"""
Smoke check against the real text and image services (needs API keys in .env).
"""
import asyncio
import sys
import os

# Add the backend to the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'storyteller_backend'))

from storyteller.models import StoryRequest
from storyteller.llm import generate_story_text
from storyteller.segmenter import segment
from storyteller.illustrator import illustrate
from storyteller.settings import has_all_keys

async def check_live_apis():
    """Generate one story and illustrate its first two frames"""

    print("🧪 Checking story and image APIs...")

    if not has_all_keys():
        print("❌ API keys not configured. Please check your .env file.")
        return False

    print("✅ API keys configured")

    req = StoryRequest(
        prompt="A lonely lighthouse makes friends with a seagull",
        language="English (UK)",
        animation_style="Studio Ghibli",
    )

    print(f"📝 Test request: {req.prompt} ({req.language}, {req.animation_style})")

    try:
        print("\n🤖 Generating story text...")
        frames = segment(await generate_story_text(req))
        if not frames:
            print("❌ Story text produced no frames")
            return False
        print(f"✅ Story generated with {len(frames)} frames")
        print(f"📖 First frame: {frames[0].text[:100]}...")

        print("\n🎨 Illustrating the first two frames...")
        outcomes = await illustrate(frames[:2], req.animation_style, req.language)
        for outcome in outcomes:
            marker = "⚠️  fallback" if outcome.is_fallback else "✅"
            print(f"{marker} frame {outcome.index + 1}: {outcome.image_url}")

        return not any(o.is_fallback for o in outcomes)

    except Exception as e:
        print(f"❌ API check failed: {e}")
        import traceback
        traceback.print_exc()
        return False

if __name__ == "__main__":
    success = asyncio.run(check_live_apis())
    print("\n✅ LIVE APIS WORKING" if success else "\n💥 LIVE API CHECK FAILED")
    sys.exit(0 if success else 1)
