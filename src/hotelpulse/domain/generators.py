# src/hotelpulse/domain/generators.py
"""
Metric generators.

Each generator is a pure function of the property record, the scenario seed
and (where noted) values produced earlier in the aggregation order. None of
them draws from the process-wide random state, and each clamps its result to
the documented bound instead of letting an out-of-range value through.
"""
from __future__ import annotations

import math
from typing import Sequence

from hotelpulse.domain import catalogs
from hotelpulse.domain.property import PropertyRecord, Tier
from hotelpulse.domain.seeding import (
    BUCKET_SECONDS,
    Channel,
    ScenarioSeed,
    chance,
    next_in_range,
    next_int,
    pick,
    seed_for,
    unit,
)
from hotelpulse.domain.snapshot import (
    ACTIVE_REQUESTS_BOUNDS,
    COMPLAINT_MINUTES_BOUNDS,
    DRIVERS_NEARBY_BOUNDS,
    DRIVERS_ONLINE_BOUNDS,
    FLIGHT_COUNT_BOUNDS,
    MAX_LIVE_EVENTS,
    PASSENGER_BOUNDS,
    RATING_BOUNDS,
    RIDE_COUNT_BOUNDS,
    ROSTER_SIZE,
    SURGE_BOUNDS,
    TRAFFIC_COUNT_BOUNDS,
    WAIT_MINUTES_BOUNDS,
    CompetitorShare,
    DriverProfile,
    FleetStatus,
    FlightArrival,
    GuestComplaint,
    LiveEvent,
    MarketPosition,
    SurgeEvent,
    TrafficCondition,
)

DAYS_PER_MONTH = 30
HOURS_PER_DAY = 24

# Hourly money figure stays within +/-20% of the monthly baseline
JITTER_BOUNDS = (0.8, 1.2)

TIER_WEIGHT: dict[Tier, float] = {"PREMIUM": 3.0, "STANDARD": 2.0, "BASIC": 1.0}
STATUS_WEIGHT = {"ALREADY_EARNING": 1.0, "NOT_EARNING": 0.2}

# Delay / congestion ratio thresholds for traffic status
MODERATE_RATIO = 0.2
HEAVY_RATIO = 0.5


def clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


def clamp_int(value: float, lo: int, hi: int) -> int:
    return int(min(max(int(round(value)), lo), hi))


def display_surge(surge: float) -> float:
    """Surge as shown to humans; dependent math keeps full precision."""
    return round(surge, 1)


def _surge_pressure(surge: float) -> float:
    """0.0 at the lowest surge, 1.0 at the highest."""
    lo, hi = SURGE_BOUNDS
    return clamp((surge - lo) / (hi - lo), 0.0, 1.0)


# -----------------------------
# Demand
# -----------------------------

def generate_current_surge(record: PropertyRecord, seed: ScenarioSeed) -> float:
    lo, hi = SURGE_BOUNDS
    return clamp(next_in_range(seed, Channel.SURGE, lo, hi), lo, hi)


def generate_active_requests(record: PropertyRecord, seed: ScenarioSeed) -> int:
    lo, hi = ACTIVE_REQUESTS_BOUNDS
    return clamp_int(next_int(seed, Channel.ACTIVE_REQUESTS, lo, hi), lo, hi)


# -----------------------------
# Money
# -----------------------------

def hourly_baseline(record: PropertyRecord) -> float:
    return record.monthly_figure / (DAYS_PER_MONTH * HOURS_PER_DAY)


def demand_jitter(active_requests: int, current_surge: float) -> float:
    """
    Multiplier in JITTER_BOUNDS, increasing with requests x surge.

    Not an independent draw: the same demand always gives the same factor.
    """
    req_lo, req_hi = ACTIVE_REQUESTS_BOUNDS
    surge_lo, surge_hi = SURGE_BOUNDS
    lo_p, hi_p = req_lo * surge_lo, req_hi * surge_hi
    frac = clamp((active_requests * current_surge - lo_p) / (hi_p - lo_p), 0.0, 1.0)
    j_lo, j_hi = JITTER_BOUNDS
    return j_lo + (j_hi - j_lo) * frac


def generate_hourly_figure(
    record: PropertyRecord,
    active_requests: int,
    current_surge: float,
) -> tuple[float, float]:
    """
    Returns (hourly amount, average ride value).

    The amount is lost revenue for a property that is not earning and earned
    revenue otherwise. amount == active_requests * current_surge * average
    ride value, so the figure always moves with the two demand drivers.
    """
    amount = hourly_amount(record, active_requests, current_surge)
    return amount, amount / (active_requests * current_surge)


def hourly_amount(record: PropertyRecord, active_requests: int, current_surge: float) -> float:
    """Baseline x demand jitter, clamped to the jitter band and rounded to cents."""
    baseline = hourly_baseline(record)
    j_lo, j_hi = JITTER_BOUNDS
    amount = clamp(baseline * demand_jitter(active_requests, current_surge), baseline * j_lo, baseline * j_hi)
    return max(round(amount, 2), 0.0)


def todays_figure(hourly: float) -> int:
    """Whole dollars for a full day at the given hourly rate."""
    return int(math.floor(hourly * HOURS_PER_DAY))


# -----------------------------
# Prose
# -----------------------------

def generate_urgency_message(
    record: PropertyRecord,
    seed: ScenarioSeed,
    active_requests: int,
    current_surge: float,
) -> str:
    """Template choice is seeded; the numbers are the already-fixed values."""
    templates = catalogs.URGENCY_TEMPLATES_EARNING if record.is_earning else catalogs.URGENCY_TEMPLATES_LOSS
    template = pick(seed, Channel.URGENCY, templates)
    return template.format(requests=active_requests, surge=f"{display_surge(current_surge):.1f}")


def surge_price(current_surge: float) -> int:
    return int(round(catalogs.BASE_FARE * current_surge))


def generate_complaint_text(
    record: PropertyRecord,
    seed: ScenarioSeed,
    current_surge: float,
    competitor_name: str | None,
) -> str:
    if record.is_earning:
        pool: Sequence[str] = catalogs.PRAISE_TEMPLATES
    else:
        pool = tuple(record.seed_complaints) + catalogs.COMPLAINT_TEMPLATES
    template = pick(seed, Channel.COMPLAINT, pool)
    return (
        template.replace("{hotel}", record.name)
        .replace("{competitor}", competitor_name or catalogs.DEFAULT_COMPETITOR_NAME)
        .replace("{surge_price}", str(surge_price(current_surge)))
    )


def relative_time_label(minutes: int) -> str:
    if minutes < 60:
        return f"{minutes} minutes ago"
    hours = minutes // 60
    return "1 hour ago" if hours == 1 else f"{hours} hours ago"


def generate_complaint_time(seed: ScenarioSeed) -> tuple[int, str]:
    lo, hi = COMPLAINT_MINUTES_BOUNDS
    minutes = clamp_int(next_int(seed, Channel.COMPLAINT_TIME, lo, hi), lo, hi)
    return minutes, relative_time_label(minutes)


def generate_guest_complaint(
    record: PropertyRecord,
    seed: ScenarioSeed,
    current_surge: float,
    competitor_name: str | None,
) -> GuestComplaint:
    minutes, label = generate_complaint_time(seed)
    text = generate_complaint_text(record, seed, current_surge, competitor_name)
    return GuestComplaint(text=text, minutes_ago=minutes, label=label)


# -----------------------------
# Flights
# -----------------------------

def flight_delay_probability(current_surge: float) -> float:
    return clamp(0.05 + 0.6 * _surge_pressure(current_surge), 0.05, 0.65)


def flight_delay_minutes(current_surge: float) -> int:
    """Minimum delay for the given surge; seeded jitter is added on top."""
    return int(round(10 + 30 * _surge_pressure(current_surge)))


def generate_flight_arrivals(seed: ScenarioSeed, current_surge: float) -> tuple[FlightArrival, ...]:
    lo, hi = FLIGHT_COUNT_BOUNDS
    count = next_int(seed, Channel.FLIGHT_COUNT, lo, hi)
    p_delay = flight_delay_probability(current_surge)
    pax_lo, pax_hi = PASSENGER_BOUNDS

    flights: list[FlightArrival] = []
    for i in range(count):
        d = i * 5
        airline = pick(seed, Channel.FLIGHT, catalogs.AIRLINES, draw=d)
        number = next_int(seed, Channel.FLIGHT, 100, 2999, draw=d + 1)
        origin = pick(seed, Channel.FLIGHT, catalogs.ORIGINS, draw=d + 2)
        passengers = clamp_int(next_int(seed, Channel.FLIGHT, pax_lo, pax_hi, draw=d + 3), pax_lo, pax_hi)
        eta = next_int(seed, Channel.FLIGHT, 5, 55, draw=d + 4)

        if chance(seed, Channel.FLIGHT_STATUS, p_delay, draw=i * 2):
            # a small share of disrupted flights are cancelled outright
            if chance(seed, Channel.FLIGHT_STATUS, 0.15, draw=i * 2 + 1):
                status, label = "Cancelled", "Cancelled"
            else:
                delay = flight_delay_minutes(current_surge) + next_int(seed, Channel.FLIGHT_STATUS, 0, 20, draw=100 + i)
                status, label = "Delayed", f"Delayed {delay} min"
        else:
            status, label = "On Time", f"ETA {eta} min"

        flights.append(
            FlightArrival(
                flight_code=f"{airline} {number}",
                origin=origin,
                passenger_count=passengers,
                status=status,
                eta_label=label,
            )
        )
    return tuple(flights)


# -----------------------------
# Traffic
# -----------------------------

def traffic_status(free_flow_minutes: int, delay_minutes: int) -> str:
    ratio = delay_minutes / max(free_flow_minutes, 1)
    if ratio >= HEAVY_RATIO:
        return "Heavy"
    if ratio >= MODERATE_RATIO:
        return "Moderate"
    return "Light"


def heavy_delay_minutes(free_flow_minutes: int) -> int:
    """Smallest delay that reads as Heavy on a route."""
    return int(math.ceil(max(free_flow_minutes, 1) * HEAVY_RATIO))


def routes_for(record: PropertyRecord) -> tuple[tuple[str, int], ...]:
    return catalogs.ROUTES_BY_CITY.get(record.city, catalogs.DEFAULT_ROUTES)


def generate_traffic_conditions(
    record: PropertyRecord,
    seed: ScenarioSeed,
    current_surge: float,
) -> tuple[TrafficCondition, ...]:
    pool = routes_for(record)
    lo, hi = TRAFFIC_COUNT_BOUNDS
    count = next_int(seed, Channel.TRAFFIC_COUNT, min(lo, len(pool)), min(hi, len(pool)))

    # seeded ordering of the route pool, without repeats
    order = sorted(range(len(pool)), key=lambda idx: unit(seed, Channel.TRAFFIC, draw=idx))
    max_congestion = 0.25 + 0.9 * _surge_pressure(current_surge)

    conditions: list[TrafficCondition] = []
    for i, idx in enumerate(order[:count]):
        label, free_flow = pool[idx]
        congestion = next_in_range(seed, Channel.TRAFFIC_STATUS, 0.0, max_congestion, draw=i)
        delay = int(round(free_flow * congestion))
        conditions.append(
            TrafficCondition(
                route_label=label,
                current_minutes=free_flow + delay,
                delay_minutes=delay,
                status=traffic_status(free_flow, delay),
            )
        )
    return tuple(conditions)


# -----------------------------
# Drivers
# -----------------------------

def generate_drivers_online(seed: ScenarioSeed) -> int:
    lo, hi = DRIVERS_ONLINE_BOUNDS
    return clamp_int(next_int(seed, Channel.FLEET, lo, hi), lo, hi)


def generate_fleet_status(
    seed: ScenarioSeed,
    active_requests: int,
    current_surge: float,
    drivers_online: int | None = None,
) -> FleetStatus:
    d_lo, d_hi = DRIVERS_ONLINE_BOUNDS
    online = clamp_int(drivers_online if drivers_online is not None else generate_drivers_online(seed), d_lo, d_hi)

    pressure = _surge_pressure(current_surge)
    utilization = clamp(0.45 + 0.4 * pressure + next_in_range(seed, Channel.FLEET, -0.1, 0.1, draw=1), 0.0, 1.0)
    active_rides = clamp_int(online * utilization, 0, online)

    w_lo, w_hi = WAIT_MINUTES_BOUNDS
    wait = clamp_int(3 + 8 * pressure + next_in_range(seed, Channel.FLEET, -1.0, 2.0, draw=2), w_lo, w_hi)

    # drivers close to the curb thin out as surge climbs
    n_lo, n_hi = DRIVERS_NEARBY_BOUNDS
    nearby = clamp_int(n_hi - (n_hi - n_lo) * pressure + next_in_range(seed, Channel.FLEET, -2.0, 1.0, draw=3), n_lo, n_hi)

    return FleetStatus(
        drivers_online=online,
        active_rides=active_rides,
        average_wait_minutes=wait,
        utilization_pct=clamp_int(100 * active_rides / online, 0, 100),
        peak_drivers_needed=online + int(math.ceil(active_requests * (current_surge - 1.0) / 2)),
        drivers_nearby=nearby,
    )


def generate_driver_roster(seed: ScenarioSeed, fleet: FleetStatus) -> tuple[DriverProfile, ...]:
    names = sorted(catalogs.DRIVER_NAMES, key=lambda n: unit(seed, Channel.ROSTER, draw=hash_name(n)))[:ROSTER_SIZE]

    # share of the top drivers shown online follows the fleet size
    d_lo, d_hi = DRIVERS_ONLINE_BOUNDS
    online_count = clamp_int(ROSTER_SIZE * fleet.drivers_online / d_hi, 1, ROSTER_SIZE)
    online_rank = sorted(range(ROSTER_SIZE), key=lambda i: unit(seed, Channel.ROSTER, draw=500 + i))
    online = set(online_rank[:online_count])

    r_lo, r_hi = RATING_BOUNDS
    c_lo, c_hi = RIDE_COUNT_BOUNDS
    roster: list[DriverProfile] = []
    for i, name in enumerate(names):
        d = 1000 + i * 4
        rides = clamp_int(next_int(seed, Channel.ROSTER, c_lo, c_hi, draw=d), c_lo, c_hi)
        per_ride = next_in_range(seed, Channel.ROSTER, 12.0, 18.0, draw=d + 1)
        roster.append(
            DriverProfile(
                name=name,
                vehicle=pick(seed, Channel.ROSTER, catalogs.VEHICLES, draw=d + 2),
                rating=round(clamp(next_in_range(seed, Channel.ROSTER, r_lo, r_hi, draw=d + 3), r_lo, r_hi), 1),
                ride_count=rides,
                earnings=int(round(rides * per_ride)),
                online_status="active" if i in online else "offline",
            )
        )
    roster.sort(key=lambda p: p.ride_count, reverse=True)
    return tuple(roster)


def hash_name(name: str) -> int:
    """Stable small integer for a catalog entry (draw index)."""
    return sum((i + 1) * ord(ch) for i, ch in enumerate(name))


# -----------------------------
# Market
# -----------------------------

def market_weight(record: PropertyRecord) -> float:
    return TIER_WEIGHT[record.tier] * STATUS_WEIGHT[record.monetization_status]


def compute_market_position(
    record: PropertyRecord,
    competitors: Sequence[PropertyRecord],
) -> MarketPosition:
    """
    Share of local hotel ride demand captured by this property.

    Weights come from tier and monetization status only, so the complement
    is fully explained by who the competitors are.
    """
    own = market_weight(record)
    total = own + sum(market_weight(c) for c in competitors)

    shares = tuple(
        CompetitorShare(
            identifier=c.identifier,
            name=c.name,
            tier=c.tier,
            monetization_status=c.monetization_status,
            share=round(100.0 * market_weight(c) / total, 1),
        )
        for c in competitors
    )
    market_share = round(clamp(100.0 * own / total, 0.0, 100.0), 1)
    return MarketPosition(
        market_share=market_share,
        competitor_share=round(100.0 - market_share, 1),
        competitors=shares,
    )


# -----------------------------
# Extras
# -----------------------------

def generate_surge_event(seed: ScenarioSeed, current_surge: float) -> SurgeEvent | None:
    """Upcoming demand spike; more likely the higher surge already is."""
    if not chance(seed, Channel.SURGE_EVENT, _surge_pressure(current_surge)):
        return None
    _, hi = SURGE_BOUNDS
    bump = next_in_range(seed, Channel.SURGE_EVENT, 0.0, 0.6, draw=3)
    # round up so the expected surge never reads lower than the current one
    expected = min(max(math.ceil((current_surge + bump) * 10) / 10, current_surge), hi)
    return SurgeEvent(
        event_type=pick(seed, Channel.SURGE_EVENT, catalogs.SURGE_EVENT_TYPES, draw=1),
        starts_in_minutes=next_int(seed, Channel.SURGE_EVENT, 15, 120, draw=2),
        expected_surge=expected,
    )


def pick_competitor_just_activated(seed: ScenarioSeed, competitors: Sequence[PropertyRecord]) -> str | None:
    earning = [c.name for c in competitors if c.is_earning]
    if not earning:
        return None
    return pick(seed, Channel.COMPETITOR, earning)


# -----------------------------
# Live feed
# -----------------------------

def _feed_hosts(record: PropertyRecord, competitors: Sequence[PropertyRecord]) -> list[str]:
    # rides only run out of properties that are already earning
    return [r.name for r in (record, *competitors) if r.is_earning] or [catalogs.DEFAULT_COMPETITOR_NAME]


def generate_live_event(
    record: PropertyRecord,
    seed: ScenarioSeed,
    competitors: Sequence[PropertyRecord],
    seconds_ago: int = 0,
) -> LiveEvent:
    """The single feed event published during seed.time_bucket."""
    ch = Channel.LIVE_EVENT
    event_type = pick(seed, ch, catalogs.LIVE_EVENT_TYPES)
    surge = generate_current_surge(record, seed)
    host = pick(seed, ch, _feed_hosts(record, competitors), draw=1)
    value: str | None = None

    if event_type == "ride.started":
        message = f"{host} → {pick(seed, ch, catalogs.RIDE_DESTINATIONS, draw=2)}"
        value = f"${next_in_range(seed, ch, *catalogs.LOCAL_FARE_RANGE, draw=3) * surge:,.2f}"
    elif event_type == "ride.completed":
        message = f"{host} → {pick(seed, ch, catalogs.AIRPORT_TERMINALS, draw=2)}"
        value = f"${next_in_range(seed, ch, *catalogs.AIRPORT_FARE_RANGE, draw=3) * surge:,.2f}"
    elif event_type == "driver.online":
        message = f"Driver activated in {record.city or 'Phoenix'}"
    elif event_type == "hotel.signup":
        message = "New hotel registered"
    elif event_type == "instant.triggered":
        message = "Instant pickup activated"
        value = "0 sec wait"
    else:
        message = "Daily revenue goal hit"
        value = f"${pick(seed, ch, catalogs.REVENUE_MILESTONES, draw=2):,}"

    return LiveEvent(
        event_type=event_type,
        message=message,
        value=value,
        time_bucket=seed.time_bucket,
        seconds_ago=seconds_ago,
    )


def generate_live_events(
    record: PropertyRecord,
    seed: ScenarioSeed,
    competitors: Sequence[PropertyRecord],
    bucket_seconds: float = BUCKET_SECONDS,
) -> tuple[LiveEvent, ...]:
    """
    Newest-first feed of the last MAX_LIVE_EVENTS buckets, one event each.

    Every event depends only on (identifier, its own bucket), so moving to
    the next bucket pushes one new event on top and drops the oldest.
    """
    events: list[LiveEvent] = []
    for age in range(MAX_LIVE_EVENTS):
        bucket = seed.time_bucket - age
        if bucket < 0:
            break
        events.append(
            generate_live_event(
                record,
                seed_for(seed.identifier, bucket),
                competitors,
                seconds_ago=int(round(age * bucket_seconds)),
            )
        )
    return tuple(events)
