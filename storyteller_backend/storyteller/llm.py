import logging
from typing import List, Optional
from .prompts import SYSTEM_PROMPT_TEMPLATE, USER_PROMPT_TEMPLATE, FRAME_COUNT
from .registry import language_code
from .settings import (
    OPENAI_API_KEY, OPENAI_STORY_MODEL, OPENAI_IMAGE_MODEL, STORY_TEMPERATURE, STORY_MAX_TOKENS,
    IMAGE_SIZE, IMAGE_QUALITY, IMAGE_STYLE_HINT, IMAGE_COUNT,
)

logger = logging.getLogger(__name__)

_client = None

def _get_client():
    global _client
    if _client is None:
        from openai import AsyncOpenAI
        if not OPENAI_API_KEY:
            raise RuntimeError("OPENAI_API_KEY is not set; please configure your .env")
        _client = AsyncOpenAI(api_key=OPENAI_API_KEY)
    return _client

def build_messages(req) -> List[dict]:
    code = language_code(req.language)
    system = SYSTEM_PROMPT_TEMPLATE.format(
        frame_count=FRAME_COUNT,
        language_code=code,
        language=req.language,
    )
    user = USER_PROMPT_TEMPLATE.format(language_code=code, prompt=req.prompt)
    return [
        {"role": "system", "content": system},
        {"role": "user", "content": user},
    ]

async def generate_story_text(req) -> str:
    logger.info(f"Calling OpenAI API to generate story in {req.language}")
    try:
        client = _get_client()
        resp = await client.chat.completions.create(
            model=OPENAI_STORY_MODEL,
            messages=build_messages(req),
            temperature=STORY_TEMPERATURE,
            max_tokens=STORY_MAX_TOKENS,
        )
        content = resp.choices[0].message.content or ""
        logger.info(f"Received story text from OpenAI ({len(content)} characters)")
        return content
    except Exception as e:
        logger.error(f"OpenAI story generation failed: {str(e)}")
        raise

async def generate_image(prompt: str) -> Optional[str]:
    """One DALL-E image for the prompt. Returns its URL, or None when the response has none."""
    logger.info(f"Generating image with {OPENAI_IMAGE_MODEL} for prompt: {prompt[:100]}...")
    client = _get_client()
    resp = await client.images.generate(
        model=OPENAI_IMAGE_MODEL,
        prompt=prompt,
        size=IMAGE_SIZE,
        quality=IMAGE_QUALITY,
        n=IMAGE_COUNT,
        style=IMAGE_STYLE_HINT,
    )
    data = resp.data or []
    return data[0].url if data else None
