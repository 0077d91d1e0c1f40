from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, StrictStr

from livepreview.api.deps import get_root_store
from livepreview.core.control import reconfigure
from livepreview.core.errors import MissingInput, PathResolutionError
from livepreview.core.state import ActiveRootStore

router = APIRouter()


class SetupRequest(BaseModel):
    directoryPath: Optional[StrictStr] = None


@router.patch("/setup")
def setup(payload: Optional[SetupRequest] = None, store: ActiveRootStore = Depends(get_root_store)):
    """Switch the served directory. A failed attempt leaves serving disabled."""
    directory_path = payload.directoryPath if payload is not None else None
    print(f"Received PATCH /setup with path: {directory_path}")

    try:
        absolute_path = reconfigure(store, directory_path)
    except MissingInput:
        return JSONResponse(status_code=400, content={"error": "directoryPath is required in body"})
    except PathResolutionError:
        return JSONResponse(
            status_code=400,
            content={"error": f"Failed to set directory: {directory_path}. Check logs."},
        )

    return {"message": f"Server now serving: {absolute_path}"}
