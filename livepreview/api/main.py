import sys
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from livepreview import __version__
from livepreview.api.routes_setup import router as setup_router
from livepreview.api.routes_static import router as static_router
from livepreview.core.state import ActiveRootStore


async def invalid_body(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


async def unexpected_error(request: Request, exc: Exception):
    print(f"❌ Unhandled error on {request.method} {request.scope['path']}: {exc!r}", file=sys.stderr)
    # Raised errors skip CORSMiddleware, so the preview frontend needs the header here
    return PlainTextResponse(
        "Internal server error",
        status_code=500,
        headers={"Access-Control-Allow-Origin": "*"},
    )


def create_app(store: Optional[ActiveRootStore] = None) -> FastAPI:
    """Build the app around its own root store (unconfigured unless one is passed in)."""
    # No docs routes: every path except /setup belongs to the served directory
    app = FastAPI(
        title="Live Preview Server",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.root_store = store if store is not None else ActiveRootStore()

    # The preview frontend is hosted elsewhere, so allow everything.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, invalid_body)
    app.add_exception_handler(Exception, unexpected_error)

    # Wire routers; the static catch-all must come last
    app.include_router(setup_router)
    app.include_router(static_router)
    return app


# Entry point for `uvicorn livepreview.api.main:app`; serve.py builds its own
app = create_app()
