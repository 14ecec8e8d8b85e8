"""Current job id package."""

from sabwait.jobs.models import JobUpdateRequest
from sabwait.jobs.store import JobStore

__all__ = ["JobStore", "JobUpdateRequest"]
