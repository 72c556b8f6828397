# src/hotelpulse/domain/errors.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class DirectoryMiss(LookupError):
    """Raised only by strict lookups; normal resolution falls back instead."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"property {identifier!r} not found in directory")
        self.identifier = identifier


class SubscriptionMisuse(RuntimeError):
    """Programmer error in the refresh subscription lifecycle."""


@dataclass(frozen=True)
class InvariantViolation:
    """
    A cross-field rule that a freshly composed snapshot failed.

    Never raised. The aggregator logs it, counts it and corrects the
    offending field from the fields already fixed.
    """
    rule: str
    message: str
    context: dict[str, Any] = field(default_factory=dict)
