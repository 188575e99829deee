# armpose/api/routes/pose.py
"""
Latest pose route.
"""
from fastapi import APIRouter, Depends

from ..deps import get_store
from ...core import PoseStore
from ...services.pose_service import get_latest_pose_service

router = APIRouter(tags=["pose"])


@router.get("/latest_pose")
@router.get("/get_run_pose", include_in_schema=False)
def latest_pose(store: PoseStore = Depends(get_store)):
    """Get the most recently created pose, or {} if there is none."""
    return get_latest_pose_service(store)
