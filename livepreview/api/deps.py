from fastapi import Request

from livepreview.core.state import ActiveRootStore


def get_root_store(request: Request) -> ActiveRootStore:
    return request.app.state.root_store
