# src/hotelpulse/services/aggregator.py
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Sequence, TypedDict

from hotelpulse.adapters.config import config
from hotelpulse.adapters.directory import default_directory
from hotelpulse.adapters.logging_utils import get_logger
from hotelpulse.domain import generators as gen
from hotelpulse.domain.errors import InvariantViolation
from hotelpulse.domain.ports import PropertyLookup
from hotelpulse.domain.property import PropertyRecord
from hotelpulse.domain.rules import apply_corrections, check_invariants
from hotelpulse.domain.seeding import ScenarioSeed
from hotelpulse.domain.snapshot import (
    ACTIVE_REQUESTS_BOUNDS,
    DRIVERS_ONLINE_BOUNDS,
    MetricSnapshot,
)

logger = get_logger(__name__)


class AggregatorState(str, Enum):
    IDLE = "idle"
    COMPOSING = "composing"
    VALIDATING = "validating"
    FINALIZED = "finalized"


class Pinned(TypedDict, total=False):
    """Values the caller fixes instead of drawing them (smoothed counters)."""
    active_requests: int
    drivers_online: int


class ScenarioAggregator:
    """
    Composes every generator into one snapshot, then validates it.

    Generation order is fixed so later fields can consume earlier ones:

        surge -> active requests -> hourly figure -> urgency message
        -> guest complaint -> flights -> traffic -> fleet -> roster
        -> market position -> surge event -> competitor activation
        -> live feed

    A failed cross-field rule is corrected from the fields already fixed;
    there is no retry with fresh randomness. The corrected draft is checked
    once more and anything still failing is logged as an error.
    """

    def __init__(self, directory: PropertyLookup | None = None, *, bucket_seconds: float | None = None) -> None:
        self.directory = directory or default_directory
        self.bucket_seconds = bucket_seconds if bucket_seconds is not None else config.BUCKET_SECONDS
        self.state = AggregatorState.IDLE
        self.violation_count = 0
        self.unresolved_count = 0
        self.last_violations: List[InvariantViolation] = []
        self.last_unresolved: List[InvariantViolation] = []

    def _competitors(self, record: PropertyRecord) -> tuple[list[PropertyRecord], str | None]:
        """Competitor records (fallback for unknown codes) and the first known name."""
        records: list[PropertyRecord] = []
        first_known: str | None = None
        for code in record.competitor_identifiers:
            rec = self.directory.lookup(code)
            if rec is not None and first_known is None:
                first_known = rec.name
            records.append(rec if rec is not None else self.directory.fallback_for(code))
        return records, first_known

    def _compose(
        self,
        record: PropertyRecord,
        seed: ScenarioSeed,
        pinned: Pinned,
        competitors: Sequence[PropertyRecord],
        competitor_name: str | None,
    ) -> Dict[str, Any]:
        surge = gen.generate_current_surge(record, seed)

        req_lo, req_hi = ACTIVE_REQUESTS_BOUNDS
        if "active_requests" in pinned:
            active = gen.clamp_int(pinned["active_requests"], req_lo, req_hi)
        else:
            active = gen.generate_active_requests(record, seed)

        amount, avg_ride_value = gen.generate_hourly_figure(record, active, surge)
        daily = gen.todays_figure(amount)

        drivers_online = pinned.get("drivers_online")
        if drivers_online is not None:
            drivers_online = gen.clamp_int(drivers_online, *DRIVERS_ONLINE_BOUNDS)
        fleet = gen.generate_fleet_status(seed, active, surge, drivers_online)

        return {
            "identifier": record.identifier,
            "time_bucket": seed.time_bucket,
            "monetization_status": record.monetization_status,
            "active_requests": active,
            "current_surge": surge,
            "display_surge": gen.display_surge(surge),
            "average_ride_value": avg_ride_value,
            "hourly_loss": None if record.is_earning else amount,
            "hourly_revenue": amount if record.is_earning else None,
            "todays_missed_revenue": None if record.is_earning else daily,
            "todays_revenue": daily if record.is_earning else None,
            "urgency_message": gen.generate_urgency_message(record, seed, active, surge),
            "last_guest_complaint": gen.generate_guest_complaint(record, seed, surge, competitor_name),
            "flight_arrivals": gen.generate_flight_arrivals(seed, surge),
            "traffic_conditions": gen.generate_traffic_conditions(record, seed, surge),
            "fleet": fleet,
            "driver_roster": gen.generate_driver_roster(seed, fleet),
            "market_position": gen.compute_market_position(record, competitors),
            "surge_event": gen.generate_surge_event(seed, surge),
            "competitor_just_activated": gen.pick_competitor_just_activated(seed, competitors),
            "live_events": gen.generate_live_events(record, seed, competitors, self.bucket_seconds),
            "corrections": (),
        }

    def _log(self, level: str, event: str, record: PropertyRecord, seed: ScenarioSeed, v: InvariantViolation) -> None:
        getattr(logger, level)(
            event,
            extra={
                "context": {
                    "rule": v.rule,
                    "detail": v.message,
                    "identifier": record.identifier,
                    "time_bucket": seed.time_bucket,
                    **v.context,
                }
            },
        )

    def aggregate(
        self,
        record: PropertyRecord,
        seed: ScenarioSeed,
        *,
        pinned: Pinned | None = None,
    ) -> MetricSnapshot:
        competitors, competitor_name = self._competitors(record)

        self.state = AggregatorState.COMPOSING
        draft = self._compose(record, seed, pinned or {}, competitors, competitor_name)

        self.state = AggregatorState.VALIDATING
        violations = check_invariants(record, draft, competitors)
        unresolved: List[InvariantViolation] = []
        if violations:
            self.violation_count += len(violations)
            for v in violations:
                self._log("warning", "invariant_violation", record, seed, v)
            draft = apply_corrections(record, draft, violations, competitors)

            unresolved = check_invariants(record, draft, competitors)
            self.unresolved_count += len(unresolved)
            for v in unresolved:
                self._log("error", "invariant_unresolved", record, seed, v)
        self.last_violations = violations
        self.last_unresolved = unresolved

        snapshot = MetricSnapshot(**draft)
        self.state = AggregatorState.FINALIZED
        return snapshot


def aggregate(record: PropertyRecord, seed: ScenarioSeed, *, directory: PropertyLookup | None = None) -> MetricSnapshot:
    """One-shot aggregation with a throwaway aggregator."""
    return ScenarioAggregator(directory).aggregate(record, seed)
