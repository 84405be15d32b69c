# app/routers/roast.py
import json
import logging
from typing import Any, Optional, Union

import httpx
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from app.config import Settings, get_settings

router = APIRouter(tags=["roast"])

logger = logging.getLogger("uvicorn.error")


def build_http_client(settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.roast_timeout, follow_redirects=True, transport=transport)


async def get_http_client(settings: Settings = Depends(get_settings)):
    async with build_http_client(settings) as client:
        yield client


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else json.dumps(value)


def unwrap_roast(text: str) -> str:
    """
    Pull the roast out of an upstream body.

    The worker answers {"roast": ...} where the value is sometimes itself a
    JSON document carrying another "roast" field. Anything that does not
    parse is handed back as-is.
    """
    try:
        parsed = json.loads(text)
        roast = parsed.get("roast") if isinstance(parsed, dict) else None
        if not roast:
            return text
        if isinstance(roast, str) and roast.startswith("{"):
            nested = json.loads(roast)
            inner = nested.get("roast") if isinstance(nested, dict) else None
            return _as_text(inner or roast)
        return _as_text(roast)
    except ValueError:
        logger.info("Upstream body is not JSON, returning raw text")
        return text


@router.post("/roast")
async def roast(
    image: Union[UploadFile, str, None] = File(None),
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    if image is None or image == "":
        raise HTTPException(400, "No image provided")

    try:
        if isinstance(image, str):
            # plain form value, forwarded as a field without a filename
            logger.info("Received text image field (%d chars)", len(image))
            files = {"image": (None, image)}
        else:
            content = await image.read()
            logger.info("Received image: %s (%s, %d bytes)", image.filename, image.content_type, len(content))
            files = {
                "image": (
                    image.filename or "image",
                    content,
                    image.content_type or "application/octet-stream",
                )
            }

        headers = {}
        if settings.cloudflare_api:
            headers["Authorization"] = f"Bearer {settings.cloudflare_api}"
        else:
            logger.warning("CLOUDFLARE_API is not set; calling roast endpoint without credentials")

        resp = await client.post(settings.cloudflare_uri, headers=headers, files=files)
        text = resp.text
        if not resp.is_success:
            logger.warning("Roast endpoint returned %s", resp.status_code)
            raise HTTPException(resp.status_code, text)

        return {"roast": unwrap_roast(text)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Roast request failed")
        raise HTTPException(500, str(e) or "Unknown error")
