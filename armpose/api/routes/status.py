# armpose/api/routes/status.py
"""
Status routes.
"""
from fastapi import APIRouter, Depends

from ..deps import get_store
from ...core import PoseStore
from ...models import ErrorResponse, StatusResponse
from ...services.pose_service import get_store_status_service

router = APIRouter(tags=["status"])


@router.get(
    "/status",
    response_model=StatusResponse,
    responses={503: {"model": ErrorResponse}},
)
def status(store: PoseStore = Depends(get_store)):
    """Check that the pose store answers."""
    return get_store_status_service(store)
