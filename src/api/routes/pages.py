"""HTML shell route."""

from pathlib import Path

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse

router = APIRouter(tags=["pages"])

INDEX_FILE = "index.html"


@router.get("/", include_in_schema=False)
async def index(request: Request) -> FileResponse:
    """Serve the page that hosts the carousel."""
    static_dir: Path = request.app.state.static_dir
    index_path = static_dir / INDEX_FILE
    if not index_path.is_file():
        raise HTTPException(status_code=404)
    return FileResponse(index_path, media_type="text/html")
