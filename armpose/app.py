# armpose/app.py
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .api.deps import get_store, set_store
from .config import StoreConfig
from .api.routes import router
from .core import PoseStore, PoseStoreError
from .models import ErrorResponse

log = logging.getLogger(__name__)


def create_app(store: Optional[PoseStore] = None) -> FastAPI:
    """Build the API. Without a store, one is built from ARMPOSE_* env."""
    app = FastAPI(title="Arm Pose API", version=__version__)

    # GET-only, no credentials; keep wildcard origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    if store is None:
        store = PoseStore(StoreConfig.from_env())
    set_store(store)

    # ---------------------- Errors -------------------------
    @app.exception_handler(PoseStoreError)
    async def pose_store_error(request: Request, exc: PoseStoreError):
        return JSONResponse(
            status_code=503,
            content=ErrorResponse(error=str(exc)).model_dump(),
        )

    # ---------------------- Lifecycle ----------------------
    @app.on_event("startup")
    async def on_startup():
        log.info("serving poses from %s", get_store().describe())

    @app.on_event("shutdown")
    async def on_shutdown():
        get_store().dispose()

    app.include_router(router)
    return app
