"""Waitlist domain package."""

from sabwait.waitlist.registry import ACTIVE_POSITION_THRESHOLD
from sabwait.waitlist.registry import ConsumeResult
from sabwait.waitlist.registry import RepositionResult
from sabwait.waitlist.registry import WaitlistEngine
from sabwait.waitlist.registry import WaitlistEntry
from sabwait.waitlist.registry import WaitlistListing
from sabwait.waitlist.models import AdmitRequest
from sabwait.waitlist.models import ConsumeStealsRequest
from sabwait.waitlist.models import CreditStealsRequest
from sabwait.waitlist.models import RemoveRequest
from sabwait.waitlist.models import RepositionRequest

__all__ = [
    "ACTIVE_POSITION_THRESHOLD",
    "AdmitRequest",
    "ConsumeResult",
    "ConsumeStealsRequest",
    "CreditStealsRequest",
    "RemoveRequest",
    "RepositionRequest",
    "RepositionResult",
    "WaitlistEngine",
    "WaitlistEntry",
    "WaitlistListing",
]
