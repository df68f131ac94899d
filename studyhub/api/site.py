"""Static study guides and the single-page app shell."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from studyhub.api.dependencies import get_static_site
from studyhub.services.errors import NotFoundError
from studyhub.services.static_site import StaticSite, headers_for

router = APIRouter(tags=["site"])


@router.get("/{full_path:path}", include_in_schema=False)
async def serve_site(
    full_path: str,
    site: Annotated[StaticSite, Depends(get_static_site)],
):
    """Serve a static asset, or the app shell for client-side routes."""
    if full_path.startswith("api/"):
        raise NotFoundError()

    path = site.resolve_or_shell(full_path)
    if path is None:
        raise NotFoundError()

    media_type, headers = headers_for(path)
    return FileResponse(path, media_type=media_type, headers=headers)
