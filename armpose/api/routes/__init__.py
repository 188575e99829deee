# armpose/api/routes/__init__.py
from fastapi import APIRouter

from ... import config as C
from .status import router as status_router
from .pose import router as pose_router

router = APIRouter(prefix=C.API_PREFIX)

router.include_router(status_router)
router.include_router(pose_router)
