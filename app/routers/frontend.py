# app/routers/frontend.py
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.fallback import FALLBACK_ROASTS

router = APIRouter(tags=["frontend"])

MAX_IMAGE_BYTES = 10 * 1024 * 1024

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[1] / "templates"))


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def home(request: Request):
    """Serve the upload page."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {"fallback_roasts": list(FALLBACK_ROASTS), "roast_url": "/api/roast", "max_image_bytes": MAX_IMAGE_BYTES},
    )
