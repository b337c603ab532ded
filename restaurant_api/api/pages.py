"""
Pho Huong Viet Order API — Static site

Serves the public/ folder. order.html gets the API base URL injected at
request time; unknown non-API paths fall back to index.html.
Must be included last: the catch-all route shadows anything registered after it.
"""
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import FileResponse, HTMLResponse

from restaurant_api.core.config import Settings, get_settings

API_URL_PLACEHOLDER = "__RESTAURANT_API_URL__"

router = APIRouter(tags=["pages"], include_in_schema=False)


def _index(public_dir: Path) -> FileResponse:
    index = public_dir / "index.html"
    if not index.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return FileResponse(index)


@router.get("/")
async def index(settings: Settings = Depends(get_settings)):
    return _index(settings.PUBLIC_DIR)


@router.get("/order.html")
async def order_page(settings: Settings = Depends(get_settings)):
    page = settings.PUBLIC_DIR / "order.html"
    if not page.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    html = page.read_text(encoding="utf-8")
    return HTMLResponse(html.replace(API_URL_PLACEHOLDER, settings.api_base_url))


@router.get("/{path:path}")
async def static_or_fallback(path: str, settings: Settings = Depends(get_settings)):
    if path == "api" or path.startswith("api/"):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)

    public_dir = settings.PUBLIC_DIR.resolve()
    try:
        candidate = (public_dir / path).resolve()
    except (ValueError, OSError):
        # e.g. an embedded NUL byte from "%00" in the URL
        return _index(public_dir)
    if candidate.is_relative_to(public_dir) and candidate.is_file():
        return FileResponse(candidate)
    return _index(public_dir)
