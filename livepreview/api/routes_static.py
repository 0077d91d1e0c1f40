from urllib.parse import quote

from fastapi import APIRouter, Depends, Request
from fastapi.responses import FileResponse, PlainTextResponse, RedirectResponse

from livepreview.api.deps import get_root_store
from livepreview.config import NO_STORE, NOT_CONFIGURED_MESSAGE
from livepreview.core.state import ActiveRootStore
from livepreview.core.static import NotConfigured, Redirect, Served, serve

router = APIRouter()


def request_path(request: Request) -> str:
    # scope["path"] is already percent-decoded; request.url.path would re-parse
    # it and cut names containing '?' or '#'
    return request.scope["path"]


def not_configured() -> PlainTextResponse:
    return PlainTextResponse(NOT_CONFIGURED_MESSAGE, status_code=503)


def not_found(path: str) -> PlainTextResponse:
    return PlainTextResponse(f"File not found in served directory: {path}", status_code=404)


@router.api_route("/{full_path:path}", methods=["GET", "HEAD"])
def static_files(request: Request, store: ActiveRootStore = Depends(get_root_store)):
    path = request_path(request)
    # Read the root once so the whole request sees a single directory
    outcome = serve(store.get(), path)

    if isinstance(outcome, Served):
        return FileResponse(outcome.path, media_type=outcome.media_type, headers={"Cache-Control": NO_STORE})
    if isinstance(outcome, Redirect):
        location = quote(outcome.location, safe="/")
        if request.url.query:
            location += "?" + request.url.query
        return RedirectResponse(url=location, status_code=301)
    if isinstance(outcome, NotConfigured):
        return not_configured()
    # Hidden files and paths escaping the root look the same as missing ones
    return not_found(path)


@router.api_route("/{full_path:path}", methods=["POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
def unsupported_method(request: Request, store: ActiveRootStore = Depends(get_root_store)):
    if not store.is_configured:
        return not_configured()
    return not_found(request_path(request))
