"""Exempt-list domain package."""

from sabwait.exempt.registry import ExemptRegistry
from sabwait.exempt.models import ExemptRequest

__all__ = ["ExemptRegistry", "ExemptRequest"]
