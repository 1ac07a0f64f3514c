"""
NoteKeeper Backend - Health Check Route
=========================================

What:  Liveness endpoint for process supervisors and load balancers.
How:   The service has no external dependencies to check, so "healthy"
       means the process is serving requests; the current note count and
       uptime are reported for monitoring.
"""

import logging
import time

from fastapi import APIRouter, Depends

from notekeeper import __version__
from notekeeper.dependencies import get_store
from notekeeper.schemas.note import HealthResponse
from notekeeper.services.note_store import NoteStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
@router.head("/health", include_in_schema=False)
async def health_check(store: NoteStore = Depends(get_store)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        notes=len(store),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
