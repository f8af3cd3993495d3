from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

# Ensure .env is loaded before importing modules that initialize API clients
from .settings import has_all_keys, ALLOWED_ORIGINS
from .models import StoryRequest, ImageRequest, StoryResponse
from .orchestrator import run_pipeline, StoryGenerationError
from .illustrator import generate_single_image

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="Magical Story Teller Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS or ["*"],
    allow_credentials=True,
    allow_methods=["POST", "GET", "OPTIONS"],
    allow_headers=["*"],
)

@app.get("/health")
@app.get("/api/health")
def health():
    keys_ok = has_all_keys()
    logger.info(f"Health check: API keys present = {keys_ok}")
    return {"status": "ok", "has_keys": keys_ok}

@app.post("/api/generate-story", response_model=StoryResponse)
async def generate_story(req: StoryRequest):
    if not req.prompt.strip():
        raise HTTPException(400, "prompt is required")
    logger.info(f"Story request: language={req.language}, voice={req.voice_name}, "
                f"style={req.animation_style}, prompt length={len(req.prompt)}")
    try:
        return await run_pipeline(req)
    except StoryGenerationError as e:
        logger.error(f"Story generation error: {e}")
        if e.empty:
            raise HTTPException(502, "Story generation returned no frames")
        raise HTTPException(500, "Failed to generate story")

@app.post("/api/generate-image")
async def generate_image(req: ImageRequest):
    if not req.prompt.strip():
        raise HTTPException(400, "prompt is required")
    result = await generate_single_image(req.prompt, req.animation_style, req.language)
    if isinstance(result, str):
        # Success is the bare URL string; clients rely on the two shapes differing
        return JSONResponse(result)
    return JSONResponse(result.model_dump(by_alias=True))
