# src/hotelpulse/domain/snapshot.py
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from hotelpulse.domain.property import MonetizationStatus, Tier

FlightStatus = Literal["On Time", "Delayed", "Cancelled"]
TrafficStatus = Literal["Light", "Moderate", "Heavy"]
OnlineStatus = Literal["active", "offline"]
LiveEventType = Literal[
    "ride.started",
    "ride.completed",
    "driver.online",
    "hotel.signup",
    "instant.triggered",
    "revenue.milestone",
]

# Documented bounds, shared by generators, rules and tests
ACTIVE_REQUESTS_BOUNDS = (10, 45)
SURGE_BOUNDS = (1.0, 3.5)
COMPLAINT_MINUTES_BOUNDS = (2, 180)
FLIGHT_COUNT_BOUNDS = (3, 6)
TRAFFIC_COUNT_BOUNDS = (3, 6)
PASSENGER_BOUNDS = (40, 220)
DRIVERS_ONLINE_BOUNDS = (30, 60)
WAIT_MINUTES_BOUNDS = (2, 15)
RATING_BOUNDS = (4.5, 5.0)
RIDE_COUNT_BOUNDS = (120, 950)
DRIVERS_NEARBY_BOUNDS = (3, 10)
ROSTER_SIZE = 4

# Rolling live feed: newest first, one event per time bucket
MAX_LIVE_EVENTS = 5

# Surge above which flights and traffic must visibly be disrupted
HIGH_SURGE_THRESHOLD = 2.5

# Live refresh: default cadence and largest per-tick move of smoothed counters
DEFAULT_INTERVAL_MS = 5000
MAX_REQUEST_DELTA = 3
MAX_DRIVER_DELTA = 2


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class GuestComplaint(_Frozen):
    text: str
    minutes_ago: int
    label: str  # "12 minutes ago" / "2 hours ago"


class FlightArrival(_Frozen):
    flight_code: str
    origin: str
    passenger_count: int
    status: FlightStatus
    eta_label: str


class TrafficCondition(_Frozen):
    route_label: str
    current_minutes: int
    delay_minutes: int = Field(ge=0)
    status: TrafficStatus


class DriverProfile(_Frozen):
    name: str
    vehicle: str
    rating: float
    ride_count: int
    earnings: int  # dollars
    online_status: OnlineStatus


class FleetStatus(_Frozen):
    drivers_online: int
    active_rides: int
    average_wait_minutes: int
    utilization_pct: int
    peak_drivers_needed: int
    drivers_nearby: int


class CompetitorShare(_Frozen):
    identifier: str
    name: str
    tier: Tier
    monetization_status: MonetizationStatus
    share: float


class MarketPosition(_Frozen):
    market_share: float
    competitor_share: float
    competitors: tuple[CompetitorShare, ...] = ()


class LiveEvent(_Frozen):
    event_type: LiveEventType
    message: str
    value: str | None = None
    time_bucket: int
    seconds_ago: int


class SurgeEvent(_Frozen):
    event_type: str
    starts_in_minutes: int
    expected_surge: float


class MetricSnapshot(_Frozen):
    """
    One internally consistent set of live values for a property.

    Consumers treat it as read-only and replace it on the next tick.
    """
    identifier: str
    time_bucket: int
    monetization_status: MonetizationStatus

    active_requests: int
    current_surge: float
    display_surge: float
    average_ride_value: float

    # Exactly one of these is set, depending on monetization_status
    hourly_loss: float | None = None
    hourly_revenue: float | None = None
    # whole dollars over a full day at the current hourly rate
    todays_missed_revenue: int | None = None
    todays_revenue: int | None = None

    urgency_message: str
    last_guest_complaint: GuestComplaint

    flight_arrivals: tuple[FlightArrival, ...]
    traffic_conditions: tuple[TrafficCondition, ...]

    fleet: FleetStatus
    driver_roster: tuple[DriverProfile, ...]

    market_position: MarketPosition
    surge_event: SurgeEvent | None = None
    competitor_just_activated: str | None = None
    live_events: tuple[LiveEvent, ...] = ()

    # rules that had to be corrected while composing this snapshot
    corrections: tuple[str, ...] = ()

    @property
    def hourly_figure(self) -> float:
        if self.hourly_revenue is not None:
            return self.hourly_revenue
        return self.hourly_loss or 0.0

    @property
    def arriving_passengers(self) -> int:
        return sum(f.passenger_count for f in self.flight_arrivals if f.status != "Cancelled")
