"""Browser form for trying the generator"""

from pathlib import Path
from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


@router.get("/", include_in_schema=False)
async def index():
    """Serve the prompt form"""
    page = STATIC_DIR / "index.html"
    if not page.exists():
        logger.warning(f"Form page not found at: {page}")
        raise HTTPException(status_code=404, detail="Form page not found")
    return FileResponse(str(page), media_type="text/html")
