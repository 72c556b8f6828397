# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from hotelpulse.adapters.directory import PropertyDirectory
from hotelpulse.api.http import app  # ensures imports resolve; run tests from repo root
from hotelpulse.domain import snapshot as snap_mod
from hotelpulse.domain.generators import JITTER_BOUNDS, hourly_baseline, todays_figure


@pytest.fixture(scope="session")
def client():
    return TestClient(app)


@pytest.fixture(scope="session")
def directory():
    return PropertyDirectory.builtin()


class FakeClock:
    """Hand-driven unix clock."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


def _check_bounds(snapshot, record):
    """Every documented bound on a snapshot, plus the money framing."""
    lo, hi = snap_mod.ACTIVE_REQUESTS_BOUNDS
    assert lo <= snapshot.active_requests <= hi
    lo, hi = snap_mod.SURGE_BOUNDS
    assert lo <= snapshot.current_surge <= hi
    assert snapshot.display_surge == round(snapshot.current_surge, 1)

    baseline = hourly_baseline(record)
    j_lo, j_hi = JITTER_BOUNDS
    figure = snapshot.hourly_revenue if record.is_earning else snapshot.hourly_loss
    assert figure is not None and figure >= 0
    assert baseline * j_lo - 0.01 <= figure <= baseline * j_hi + 0.01
    daily = snapshot.todays_revenue if record.is_earning else snapshot.todays_missed_revenue
    assert daily == todays_figure(figure)
    if record.is_earning:
        assert snapshot.hourly_loss is None
        assert snapshot.todays_missed_revenue is None
    else:
        assert snapshot.hourly_revenue is None
        assert snapshot.todays_revenue is None

    lo, hi = snap_mod.COMPLAINT_MINUTES_BOUNDS
    assert lo <= snapshot.last_guest_complaint.minutes_ago <= hi
    assert snapshot.last_guest_complaint.text

    lo, hi = snap_mod.FLIGHT_COUNT_BOUNDS
    assert lo <= len(snapshot.flight_arrivals) <= hi
    p_lo, p_hi = snap_mod.PASSENGER_BOUNDS
    for f in snapshot.flight_arrivals:
        assert p_lo <= f.passenger_count <= p_hi

    lo, hi = snap_mod.TRAFFIC_COUNT_BOUNDS
    assert lo <= len(snapshot.traffic_conditions) <= hi
    for t in snapshot.traffic_conditions:
        assert t.delay_minutes >= 0
        assert t.current_minutes >= t.delay_minutes

    lo, hi = snap_mod.DRIVERS_ONLINE_BOUNDS
    assert lo <= snapshot.fleet.drivers_online <= hi
    assert 0 <= snapshot.fleet.active_rides <= snapshot.fleet.drivers_online
    assert 0 <= snapshot.fleet.utilization_pct <= 100
    w_lo, w_hi = snap_mod.WAIT_MINUTES_BOUNDS
    assert w_lo <= snapshot.fleet.average_wait_minutes <= w_hi
    n_lo, n_hi = snap_mod.DRIVERS_NEARBY_BOUNDS
    assert n_lo <= snapshot.fleet.drivers_nearby <= n_hi

    assert len(snapshot.driver_roster) == snap_mod.ROSTER_SIZE
    r_lo, r_hi = snap_mod.RATING_BOUNDS
    c_lo, c_hi = snap_mod.RIDE_COUNT_BOUNDS
    for d in snapshot.driver_roster:
        assert r_lo <= d.rating <= r_hi
        assert c_lo <= d.ride_count <= c_hi
        assert d.earnings >= 0

    assert 0.0 <= snapshot.market_position.market_share <= 100.0

    assert 1 <= len(snapshot.live_events) <= snap_mod.MAX_LIVE_EVENTS
    assert snapshot.live_events[0].time_bucket == snapshot.time_bucket
    ages = [e.seconds_ago for e in snapshot.live_events]
    assert ages == sorted(ages)
    if snapshot.surge_event is not None:
        assert snapshot.current_surge <= snapshot.surge_event.expected_surge <= snap_mod.SURGE_BOUNDS[1]


@pytest.fixture(scope="session")
def check_bounds():
    return _check_bounds
