"""Single-value holder for the current game server job id."""

from __future__ import annotations

import logging
import threading

from sabwait.core.names import require_text
from sabwait.errors import NotFoundError

logger = logging.getLogger("sabwait.jobs")


class JobStore:
    def __init__(self) -> None:
        self._job_id: str | None = None
        self._updated_by: str | None = None
        self._lock = threading.Lock()

    def update(self, job_id: str, username: str | None = None) -> str:
        job_id = require_text(job_id, field="jobId")
        with self._lock:
            self._job_id = job_id
            self._updated_by = username
        if username:
            logger.info("JobId updated: %s by %s", job_id, username)
        else:
            logger.info("JobId updated: %s", job_id)
        return job_id

    def current(self) -> str:
        """Return the job id, raising NotFoundError before the first update."""
        with self._lock:
            job_id = self._job_id
        if job_id is None:
            raise NotFoundError("No JobId available")
        return job_id

    def peek(self) -> str | None:
        with self._lock:
            return self._job_id

    @property
    def updated_by(self) -> str | None:
        with self._lock:
            return self._updated_by
