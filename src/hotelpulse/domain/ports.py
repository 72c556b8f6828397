# src/hotelpulse/domain/ports.py
from __future__ import annotations

from typing import Callable, Protocol

from hotelpulse.domain.property import PropertyRecord
from hotelpulse.domain.snapshot import MetricSnapshot


# ----------------------------
# Property directory
# ----------------------------

class PropertyLookup(Protocol):
    def lookup(self, identifier: str) -> PropertyRecord | None:
        ...

    def fallback_for(self, identifier: str) -> PropertyRecord:
        ...

    def resolve(self, identifier: str) -> PropertyRecord:
        ...


# ----------------------------
# Refresh subscription callbacks
# ----------------------------

SnapshotCallback = Callable[[MetricSnapshot], None]

NotFoundCallback = Callable[[str], None]

# unix seconds, injectable so tests can drive time by hand
Clock = Callable[[], float]
