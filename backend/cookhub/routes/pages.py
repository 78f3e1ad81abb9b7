"""
CookHub Backend — Landing Page Route
======================================

What:  Serves the single-page frontend at `/` and at every GET path no other
       route claims (`/recipes/5`, `/about`, unknown `/api/...` paths).
How:   Returns the file at `settings.index_file` as-is. A missing file is a
       404 in the usual JSON error format.

This router must be included last, after the API routers and the /static
mount: its `/{path:path}` pattern matches everything they do not.
"""

from fastapi import APIRouter
from fastapi.responses import FileResponse

from cookhub.config import settings
from cookhub.exceptions import NotFoundError

router = APIRouter(tags=["Pages"])


def _landing_page() -> FileResponse:
    path = settings.index_path
    if not path.is_file():
        raise NotFoundError(resource="page", resource_id=path.name)
    return FileResponse(path, media_type="text/html")


@router.get("/", include_in_schema=False)
async def index() -> FileResponse:
    return _landing_page()


@router.get("/{path:path}", include_in_schema=False)
async def fallback(path: str) -> FileResponse:
    # Only reached under /static when no static directory is mounted
    if path.split("/", 1)[0] == "static":
        raise NotFoundError(resource="file", resource_id=path)
    return _landing_page()
