from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from src.config.settings import Settings
from src.rsvps.dependencies import get_settings_from_app
from src.rsvps.urls import ADMIN_PAGE_URL

router = APIRouter()


@router.get(ADMIN_PAGE_URL, include_in_schema=False)
async def admin_page(settings: Settings = Depends(get_settings_from_app)) -> FileResponse:
    """Serve the admin console. Only its data fetch is authenticated."""
    page = Path(settings.public_dir) / "admin.html"
    if not page.is_file():
        raise HTTPException(status_code=404, detail="Admin page not found")
    return FileResponse(page, media_type="text/html")
