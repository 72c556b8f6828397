# src/hotelpulse/services/refresh.py
from __future__ import annotations

import asyncio
import time
from enum import Enum

from loguru import logger

from hotelpulse.adapters.config import config
from hotelpulse.adapters.directory import default_directory
from hotelpulse.domain.errors import SubscriptionMisuse
from hotelpulse.domain.ports import Clock, NotFoundCallback, PropertyLookup, SnapshotCallback
from hotelpulse.domain.property import PropertyRecord
from hotelpulse.domain.seeding import seed_for, time_bucket
from hotelpulse.domain.snapshot import DEFAULT_INTERVAL_MS, MetricSnapshot
from hotelpulse.services.aggregator import Pinned, ScenarioAggregator


class SubscriptionState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


def smooth_toward(previous: int, target: int, max_delta: int) -> int:
    """Move from previous toward target by at most max_delta."""
    if target > previous:
        return min(target, previous + max_delta)
    return max(target, previous - max_delta)


class RefreshDriver:
    """
    One live subscription to one property.

    Runs on a single cooperative timer (asyncio `call_later`), never a
    thread. Each tick re-aggregates for the current time bucket; the live
    counters (active requests, drivers online) then move at most a fixed
    delta away from the previous tick, while seed-derived fields (surge,
    flights, traffic) change only when the bucket does.

    Without a running event loop the driver works in manual mode: `start`
    emits the first snapshot and the caller polls with `tick()`.
    """

    def __init__(
        self,
        directory: PropertyLookup | None = None,
        *,
        aggregator: ScenarioAggregator | None = None,
        clock: Clock = time.time,
        loop: asyncio.AbstractEventLoop | None = None,
        bucket_seconds: float | None = None,
        max_request_delta: int | None = None,
        max_driver_delta: int | None = None,
        use_fallback: bool | None = None,
    ) -> None:
        self.directory = directory or default_directory
        self.clock = clock
        self.bucket_seconds = bucket_seconds if bucket_seconds is not None else config.BUCKET_SECONDS
        self.aggregator = aggregator or ScenarioAggregator(self.directory, bucket_seconds=self.bucket_seconds)
        self.max_request_delta = max_request_delta if max_request_delta is not None else config.MAX_REQUEST_DELTA
        self.max_driver_delta = max_driver_delta if max_driver_delta is not None else config.MAX_DRIVER_DELTA
        self.use_fallback = use_fallback if use_fallback is not None else config.USE_FALLBACK

        self._explicit_loop = loop
        self._loop: asyncio.AbstractEventLoop | None = None
        self._handle: asyncio.TimerHandle | None = None
        self._state = SubscriptionState.IDLE

        self._identifier: str | None = None
        self._record: PropertyRecord | None = None
        self._interval_s = DEFAULT_INTERVAL_MS / 1000.0
        self._on_snapshot: SnapshotCallback | None = None
        self._previous: MetricSnapshot | None = None

    # -----------------------------
    # Introspection
    # -----------------------------

    @property
    def state(self) -> SubscriptionState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state is SubscriptionState.RUNNING

    @property
    def latest(self) -> MetricSnapshot | None:
        return self._previous

    @property
    def record(self) -> PropertyRecord | None:
        return self._record

    # -----------------------------
    # Lifecycle
    # -----------------------------

    def start(
        self,
        identifier: str,
        on_snapshot: SnapshotCallback,
        interval_ms: int | None = None,
        *,
        on_not_found: NotFoundCallback | None = None,
    ) -> None:
        if self._state is SubscriptionState.RUNNING:
            raise SubscriptionMisuse(f"subscription to {self._identifier!r} already running; call stop() first")

        interval_ms = interval_ms if interval_ms is not None else config.REFRESH_INTERVAL_MS
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")

        self._identifier = identifier
        self._interval_s = interval_ms / 1000.0
        self._on_snapshot = on_snapshot
        self._previous = None
        self._record = None

        record = self.directory.lookup(identifier)
        if record is None and self.use_fallback:
            record = self.directory.fallback_for(identifier)
        if record is None:
            # terminal: one signal, no ticks
            self._state = SubscriptionState.STOPPED
            logger.warning("Property {} not found; subscription not started", identifier)
            if on_not_found is not None:
                on_not_found(identifier)
            return
        self._record = record

        self._loop = self._explicit_loop
        if self._loop is None:
            try:
                self._loop = asyncio.get_running_loop()
            except RuntimeError:
                logger.debug("No running event loop; {} refreshes on manual tick()", identifier)

        self._state = SubscriptionState.RUNNING
        logger.info("Refresh started for {} every {} ms", identifier, interval_ms)

        self.tick()
        if self.running:
            self._schedule()

    def stop(self) -> None:
        """
        Cancel the timer. Once this returns, on_snapshot is not called again.

        Stopping twice is fine; stopping a driver that never started is not.
        """
        if self._state is SubscriptionState.IDLE:
            raise SubscriptionMisuse("stop() called on a subscription that was never started")
        if self._state is SubscriptionState.STOPPED:
            return
        self._state = SubscriptionState.STOPPED
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        logger.info("Refresh stopped for {}", self._identifier)

    # -----------------------------
    # Ticking
    # -----------------------------

    def _schedule(self) -> None:
        if self._loop is None:
            return
        self._handle = self._loop.call_later(self._interval_s, self._on_timer)

    def _on_timer(self) -> None:
        self._handle = None
        if not self.running:
            return
        try:
            self.tick()
        except Exception:
            self.stop()
            raise
        if self.running:
            self._schedule()

    def tick(self) -> MetricSnapshot:
        """One refresh step: aggregate, smooth against the previous tick, emit."""
        if not self.running:
            raise SubscriptionMisuse("tick() on a subscription that is not running")
        assert self._record is not None and self._identifier is not None

        bucket = time_bucket(self.clock(), self.bucket_seconds)
        seed = seed_for(self._identifier, bucket)
        snapshot = self.aggregator.aggregate(self._record, seed)

        prev = self._previous
        if prev is not None:
            pinned: Pinned = {
                "active_requests": smooth_toward(prev.active_requests, snapshot.active_requests, self.max_request_delta),
                "drivers_online": smooth_toward(
                    prev.fleet.drivers_online, snapshot.fleet.drivers_online, self.max_driver_delta
                ),
            }
            if (
                pinned["active_requests"] != snapshot.active_requests
                or pinned["drivers_online"] != snapshot.fleet.drivers_online
            ):
                snapshot = self.aggregator.aggregate(self._record, seed, pinned=pinned)

        self._previous = snapshot
        if self._on_snapshot is not None:
            self._on_snapshot(snapshot)
        return snapshot
