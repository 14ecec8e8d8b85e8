"""Status page and health routes."""

from __future__ import annotations

from html import escape

from fastapi import APIRouter
from fastapi import Depends
from fastapi.responses import HTMLResponse

from sabwait.api.deps import get_runtime
from sabwait.api.views import status_view
from sabwait.runtime import Runtime

router = APIRouter()

_STATUS_PAGE = """<!doctype html>
<html>
<head><meta charset="utf-8"><title>SAB Waitlist System</title></head>
<body>
<h1>🎮 SAB Waitlist System</h1>
<p>📋 Current JobId: {job_id}</p>
<p>👥 Active Players: {player_count}</p>
<p>✅ Exempt Users: {exempt_count}</p>
<p>⏳ Waitlist: {waitlist_count} users</p>
<hr>
<p>🔑 API Key: {api_key}</p>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
def status_page(runtime: Runtime = Depends(get_runtime)) -> str:
    """Human-readable counters for operators."""
    status = status_view(runtime)
    return _STATUS_PAGE.format(
        job_id=escape(status["jobId"] or "Not set"),
        player_count=status["playerCount"],
        exempt_count=status["exemptCount"],
        waitlist_count=status["waitlistCount"],
        api_key="Configured ✓" if status["apiKeyConfigured"] else "❌ Not Set",
    )


@router.get("/health")
def health(runtime: Runtime = Depends(get_runtime)) -> dict[str, object]:
    status = status_view(runtime)
    return {
        "status": "ok",
        "uptime": runtime.uptime_seconds(),
        "jobId": status["jobId"],
        "playerCount": status["playerCount"],
        "waitlistCount": status["waitlistCount"],
    }
