import time, httpx, asyncio, logging
from typing import Optional
from .settings import REPLICATE_API_TOKEN, REPLICATE_POLL_INTERVAL_MS, REPLICATE_POLL_TIMEOUT_S, REPLICATE_MODEL_VERSION

logger = logging.getLogger(__name__)

API_BASE = "https://api.replicate.com/v1"

def _headers():
    if not REPLICATE_API_TOKEN:
        raise RuntimeError("REPLICATE_API_TOKEN is not set; please configure your .env")
    return {"Authorization": f"Token {REPLICATE_API_TOKEN}"}

def _model_selector() -> str:
    # Prefer explicit version from env for stability; fall back to a public model alias (latest).
    return REPLICATE_MODEL_VERSION or "black-forest-labs/flux-schnell"

def _parse_selector(selector: str):
    # Returns a tuple (mode, data)
    # mode == "version": data={"version": <hash>}
    # mode == "model": data={"owner": <owner>, "name": <name>}
    owner_name, _, _version_alias = selector.partition(":")
    if "/" in owner_name:
        owner, name = owner_name.split("/", 1)
        return "model", {"owner": owner, "name": name}
    return "version", {"version": selector}

def _first_url(output) -> Optional[str]:
    if isinstance(output, list):
        output = output[0] if output else None
    return output if isinstance(output, str) else None

async def create_and_wait_image(prompt: str) -> Optional[str]:
    """Run one square image prediction and poll until it settles.

    Returns the output URL, or None when the prediction succeeded without one.
    Raises on HTTP errors, failed/canceled predictions and polling timeout.
    """
    logger.info(f"Starting Replicate image generation for prompt: {prompt[:100]}...")

    async with httpx.AsyncClient(timeout=30) as client:
        selector = _model_selector()
        mode, data = _parse_selector(selector)
        json_body = {
            "input": {
                "prompt": prompt,
                "aspect_ratio": "1:1",
                "num_outputs": 1,
            }
        }
        if mode == "version":
            json_body["version"] = data["version"]
            url = f"{API_BASE}/predictions"
        else:
            url = f"{API_BASE}/models/{data['owner']}/{data['name']}/predictions"

        logger.info(f"Sending request to Replicate: {url}")
        r = await client.post(url, headers={**_headers(), "Content-Type": "application/json"}, json=json_body)
        if r.status_code >= 400:
            logger.error(f"Replicate create failed {r.status_code}: {r.text}")
            raise RuntimeError(f"Replicate create failed {r.status_code}: {r.text}")
        pred_id = r.json()["id"]
        logger.info(f"Replicate prediction created with ID: {pred_id}")

        start = time.monotonic()
        while True:
            s = await client.get(f"{API_BASE}/predictions/{pred_id}", headers=_headers())
            if s.status_code >= 400:
                logger.error(f"Replicate status failed {s.status_code}: {s.text}")
                raise RuntimeError(f"Replicate status failed {s.status_code}: {s.text}")
            body = s.json()
            status = body.get("status")
            logger.debug(f"Replicate prediction {pred_id} status: {status}")

            if status in ("succeeded", "failed", "canceled"):
                if status != "succeeded":
                    error_detail = body.get("error")
                    logger.error(f"Replicate failed: {status}. error={error_detail}")
                    raise RuntimeError(f"Replicate failed: {status}. error={error_detail}")
                return _first_url(body.get("output"))
            if time.monotonic() - start > REPLICATE_POLL_TIMEOUT_S:
                logger.error("Replicate polling timeout")
                raise TimeoutError("Replicate polling timeout")
            await asyncio.sleep(REPLICATE_POLL_INTERVAL_MS / 1000.0)
