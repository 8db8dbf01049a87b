"""
Lesson image endpoint.

Serves files from ``<public_dir>/images``.  Missing files produce a
JSON 404 instead of the static handler's default response.
"""

from pathlib import Path

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import FileResponse

router = APIRouter()


@router.get("/{filename}")
async def get_image(filename: str, request: Request) -> FileResponse:
    images_dir = (Path(request.app.state.public_dir) / "images").resolve()
    file_path = (images_dir / filename).resolve()
    if file_path.parent != images_dir or not file_path.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Image not found")
    return FileResponse(file_path)
