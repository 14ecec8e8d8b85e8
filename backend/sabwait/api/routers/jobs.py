"""Current job id routes."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi import Depends

from sabwait.api.deps import get_runtime
from sabwait.api.errors import raise_domain_error
from sabwait.errors import SabWaitError
from sabwait.jobs.models import JobUpdateRequest
from sabwait.runtime import Runtime
from sabwait.ws.broadcast import broadcast_job_update
from sabwait.ws.broadcast import dispatch_broadcast

router = APIRouter()


@router.post("/update")
def update_job_id(
    payload: JobUpdateRequest,
    runtime: Runtime = Depends(get_runtime),
) -> dict[str, object]:
    """Record the game server the live session is running on."""
    try:
        job_id = runtime.jobs.update(payload.job_id, username=payload.username)
    except SabWaitError as exc:
        raise_domain_error(exc, message="jobId is required")
    dispatch_broadcast(runtime, broadcast_job_update)
    return {"success": True, "jobId": job_id}


@router.get("/getjobid")
def get_job_id(runtime: Runtime = Depends(get_runtime)) -> dict[str, object]:
    try:
        job_id = runtime.jobs.current()
    except SabWaitError as exc:
        raise_domain_error(exc)
    return {"jobId": job_id}
