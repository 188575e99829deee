# armpose/services/pose_service.py
from __future__ import annotations
import base64
import logging
from typing import Any, Dict

from fastapi.encoders import jsonable_encoder

from ..core import PoseStore
from ..models import StatusResponse

log = logging.getLogger(__name__)

_ENCODERS = {bytes: lambda b: base64.b64encode(b).decode("ascii")}


def get_latest_pose_service(store: PoseStore) -> Dict[str, Any]:
    """
    Most recent pose as a JSON-ready object keyed by column name.
    Returns {} when no pose has been stored yet; raises PoseStoreError when
    the store cannot be reached or queried.
    """
    row = store.fetch_latest()
    if row is None:
        log.debug("no poses in %s", store.cfg.table)
        return {}
    # binary payload columns go out as base64 text
    return jsonable_encoder(row, custom_encoder=_ENCODERS)


def get_store_status_service(store: PoseStore) -> StatusResponse:
    store.ping()
    return StatusResponse(ok=True, store="reachable", table=store.cfg.table)
