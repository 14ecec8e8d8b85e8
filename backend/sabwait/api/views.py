"""View builders used by REST and WS responses."""

from __future__ import annotations

from sabwait.runtime import Runtime
from sabwait.sessions.directory import SessionRecord
from sabwait.waitlist.registry import WaitlistEntry
from sabwait.waitlist.registry import WaitlistListing


def entry_view(entry: WaitlistEntry) -> dict[str, object]:
    return {
        "discordId": entry.account_id,
        "discordUsername": entry.display_name,
        "position": entry.position,
        "brainrotPaid": entry.credit_paid,
        "steals": entry.steals,
        "addedAt": entry.admitted_at,
        "status": entry.status,
    }


def listing_view(listing: WaitlistListing) -> dict[str, object]:
    return {
        "all": [entry_view(entry) for entry in listing.all],
        "active": [entry_view(entry) for entry in listing.active],
        "waiting": [entry_view(entry) for entry in listing.waiting],
        "totalCount": listing.total_count,
        "activeCount": listing.active_count,
        "waitingCount": listing.waiting_count,
    }


def player_view(record: SessionRecord) -> dict[str, object]:
    return {
        "username": record.username,
        "displayName": record.display_name,
        "userId": record.user_id,
        "device": record.device,
        "avatar": record.avatar,
        "joinedAt": record.joined_at,
    }


def players_view(runtime: Runtime) -> dict[str, object]:
    players = [player_view(record) for record in runtime.sessions.list_players()]
    return {"players": players, "count": len(players), "jobId": runtime.jobs.peek()}


def status_view(runtime: Runtime) -> dict[str, object]:
    """Counters shown by the status page, health check and WS snapshot."""
    return {
        "jobId": runtime.jobs.peek(),
        "playerCount": runtime.sessions.count(),
        "exemptCount": runtime.exempt.count(),
        "waitlistCount": runtime.waitlist.count(),
        "apiKeyConfigured": runtime.settings.api_key_configured,
    }
