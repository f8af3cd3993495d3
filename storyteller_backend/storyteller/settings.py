import os
from dotenv import load_dotenv
import logging

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Load .env file if it exists (for local development)
env_path = os.path.join(os.path.dirname(__file__), "..", ".env")
if os.path.exists(env_path):
    load_dotenv(env_path)
    logger.info("Loaded .env file for local development")
else:
    logger.info("No .env file found, using environment variables")

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_STORY_MODEL = os.getenv("OPENAI_STORY_MODEL", "gpt-4")
OPENAI_IMAGE_MODEL = os.getenv("OPENAI_IMAGE_MODEL", "dall-e-3")
STORY_TEMPERATURE = float(os.getenv("STORY_TEMPERATURE", "0.7"))
STORY_MAX_TOKENS = int(os.getenv("STORY_MAX_TOKENS", "1500"))

# "openai" (DALL-E) or "replicate"
IMAGE_PROVIDER = os.getenv("IMAGE_PROVIDER", "openai").strip().lower()
REPLICATE_API_TOKEN = os.getenv("REPLICATE_API_TOKEN", "")
REPLICATE_MODEL_VERSION = os.getenv("REPLICATE_MODEL_VERSION", "")
REPLICATE_POLL_INTERVAL_MS = int(os.getenv("REPLICATE_POLL_INTERVAL_MS", "1500"))
REPLICATE_POLL_TIMEOUT_S = int(os.getenv("REPLICATE_POLL_TIMEOUT_S", "120"))

# Fixed illustration request parameters
IMAGE_SIZE = "1024x1024"
IMAGE_QUALITY = "standard"
IMAGE_STYLE_HINT = "vivid"
IMAGE_COUNT = 1

# Frame i starts its illustration request i * IMAGE_STAGGER_MS after dispatch
IMAGE_STAGGER_MS = int(os.getenv("IMAGE_STAGGER_MS", "2000"))

PLACEHOLDER_BASE_URL = os.getenv("PLACEHOLDER_BASE_URL", "https://placehold.co").rstrip("/")

DEFAULT_LANGUAGE = "English (US)"
DEFAULT_VOICE_NAME = "en-US-Standard-C"
DEFAULT_ANIMATION_STYLE = "Disney/Pixar 3D Animation"

# Comma-separated list of allowed origins for CORS (e.g., "https://app.example.com,https://www.example.com").
_allowed_origins_env = os.getenv("ALLOWED_ORIGINS", "").strip()
if _allowed_origins_env:
    ALLOWED_ORIGINS = [o.strip() for o in _allowed_origins_env.split(",") if o.strip()]
else:
    ALLOWED_ORIGINS = ["*"]

def has_all_keys() -> bool:
    missing = []
    if not OPENAI_API_KEY: missing.append("OPENAI_API_KEY")
    if IMAGE_PROVIDER == "replicate" and not REPLICATE_API_TOKEN: missing.append("REPLICATE_API_TOKEN")
    if missing:
        logger.warning(f"Missing API keys: {', '.join(missing)}")
    return not missing
