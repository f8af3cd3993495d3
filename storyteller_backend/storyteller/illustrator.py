import asyncio, logging
from typing import Awaitable, Callable, List, Optional, Union

from .fallback import fallback_image_url
from .image_prompts import compose_prompt
from .llm import generate_image
from .models import IllustrationOutcome, ImageFallbackResponse, StoryFrame
from .replicate_client import create_and_wait_image
from .scenes import classify
from .segmenter import strip_frame_label
from .settings import IMAGE_PROVIDER, IMAGE_STAGGER_MS

logger = logging.getLogger(__name__)

ImageGenerator = Callable[[str], Awaitable[Optional[str]]]

EMPTY_RESPONSE = "empty-response"


def _is_valid_url(url) -> bool:
    return isinstance(url, str) and url.startswith(("http://", "https://"))


async def request_illustration(prompt: str) -> Optional[str]:
    """Send one illustration request to the configured image provider."""
    if IMAGE_PROVIDER == "replicate":
        return await create_and_wait_image(prompt)
    return await generate_image(prompt)


async def illustrate_frame(
    frame: StoryFrame,
    style_id: str,
    language_name: str,
    delay: float = 0,
    generate: Optional[ImageGenerator] = None,
) -> IllustrationOutcome:
    """Illustrate a single frame after an initial delay. Never raises."""
    if delay > 0:
        await asyncio.sleep(delay)
    generate = generate or request_illustration

    text = strip_frame_label(frame.text, frame.index)
    try:
        prompt = compose_prompt(text, style_id, language_name)
        logger.info(f"Generating image for frame {frame.index + 1} with style {style_id}: {prompt[:50]}...")
        url = await generate(prompt)
        if _is_valid_url(url):
            logger.info(f"Image generated for frame {frame.index + 1}: {url[:50]}...")
            return IllustrationOutcome(index=frame.index, image_url=url)
        reason = EMPTY_RESPONSE
        logger.warning(f"No valid URL in image response for frame {frame.index + 1}, using fallback image")
    except Exception as e:
        reason = f"upstream-error: {type(e).__name__}"
        logger.error(f"Error generating image for frame {frame.index + 1}: {e}")

    url = fallback_image_url(text, classify(text), frame.index)
    return IllustrationOutcome(index=frame.index, image_url=url, fallback_reason=reason)


async def illustrate(
    frames: List[StoryFrame],
    style_id: str,
    language_name: str,
    stagger_ms: Optional[int] = None,
    generate: Optional[ImageGenerator] = None,
) -> List[IllustrationOutcome]:
    """Illustrate every frame concurrently and write each image URL back by frame index.

    Frame i waits i * stagger_ms before sending its request. Every frame ends up
    with an image URL, either generated or a fallback placeholder.
    """
    stagger = (IMAGE_STAGGER_MS if stagger_ms is None else stagger_ms) / 1000.0
    logger.info(f"Generating images for {len(frames)} frames...")

    tasks = [
        asyncio.create_task(illustrate_frame(frame, style_id, language_name, delay=i * stagger, generate=generate))
        for i, frame in enumerate(frames)
    ]
    results = await asyncio.gather(*tasks, return_exceptions=True)

    outcomes = []
    for frame, result in zip(frames, results):
        if isinstance(result, BaseException):
            # illustrate_frame absorbs upstream errors; this only covers failures outside that guard
            logger.error(f"Illustration task for frame {frame.index + 1} failed: {result!r}")
            result = IllustrationOutcome(
                index=frame.index,
                image_url=fallback_image_url(frame.text, classify(frame.text), frame.index),
                fallback_reason=f"task-error: {type(result).__name__}",
            )
        outcomes.append(result)

    for outcome in outcomes:
        frames[outcome.index].image_url = outcome.image_url

    fallbacks = sum(1 for o in outcomes if o.is_fallback)
    logger.info(f"Illustrated {len(frames)} frames ({len(frames) - fallbacks} generated, {fallbacks} fallback)")
    return outcomes


async def generate_single_image(
    prompt: str,
    style_id: str,
    language_name: str,
    generate: Optional[ImageGenerator] = None,
) -> Union[str, ImageFallbackResponse]:
    """Image URL for a standalone prompt, or a fallback response marked success=False."""
    generate = generate or request_illustration
    logger.info(f"Generating image with style {style_id} for language {language_name}")
    try:
        url = await generate(compose_prompt(prompt, style_id, language_name))
    except Exception as e:
        logger.error(f"Image generation error: {e}")
        message = "Using placeholder image (image API error - check your API key or billing)"
    else:
        if _is_valid_url(url):
            logger.info(f"Successfully generated image. URL starts with: {url[:30]}...")
            return url
        logger.warning("No valid URL in image response, using fallback image")
        message = "Generated fallback image - the image service didn't return a valid URL"
    return ImageFallbackResponse(
        image_url=fallback_image_url(prompt, classify(prompt), 0),
        message=message,
    )
