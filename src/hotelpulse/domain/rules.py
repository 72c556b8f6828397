from __future__ import annotations

from typing import Any, Sequence

from hotelpulse.domain import catalogs
from hotelpulse.domain import generators as gen
from hotelpulse.domain.errors import InvariantViolation
from hotelpulse.domain.property import PropertyRecord
from hotelpulse.domain.snapshot import HIGH_SURGE_THRESHOLD, FlightArrival, TrafficCondition

# cents: the hourly figure is stored rounded to 2 decimals
MONEY_TOLERANCE = 0.01

DISRUPTED_FLIGHT_STATUSES = ("Delayed", "Cancelled")


def check_invariants(
    record: PropertyRecord,
    draft: dict[str, Any],
    competitors: Sequence[PropertyRecord],
) -> list[InvariantViolation]:
    """
    Validate a composed (not yet frozen) snapshot against the cross-field rules.

    `draft` holds MetricSnapshot fields by name.
    """
    violations: list[InvariantViolation] = []

    surge = draft["current_surge"]
    active = draft["active_requests"]

    # 1. High surge must show up as disrupted flights and heavy traffic
    if surge > HIGH_SURGE_THRESHOLD:
        if not any(f.status in DISRUPTED_FLIGHT_STATUSES for f in draft["flight_arrivals"]):
            violations.append(
                InvariantViolation(
                    rule="high_surge_flights",
                    message=f"Surge {surge:.2f}x but no delayed or cancelled flight",
                    context={"current_surge": surge},
                )
            )
        if not any(t.status == "Heavy" for t in draft["traffic_conditions"]):
            violations.append(
                InvariantViolation(
                    rule="high_surge_traffic",
                    message=f"Surge {surge:.2f}x but no heavy route",
                    context={"current_surge": surge},
                )
            )

    # 2. Hourly figure follows requests x surge x ride value, within +/-20% of baseline
    figure = draft["hourly_revenue"] if record.is_earning else draft["hourly_loss"]
    if figure is None:
        figure = 0.0
    daily = draft.get("todays_revenue") if record.is_earning else draft.get("todays_missed_revenue")
    baseline = gen.hourly_baseline(record)
    j_lo, j_hi = gen.JITTER_BOUNDS
    expected = active * surge * draft["average_ride_value"]
    if (
        figure < 0
        or daily != gen.todays_figure(figure)
        or abs(figure - expected) > MONEY_TOLERANCE
        or figure < baseline * j_lo - MONEY_TOLERANCE
        or figure > baseline * j_hi + MONEY_TOLERANCE
    ):
        violations.append(
            InvariantViolation(
                rule="hourly_proportionality",
                message="Hourly figure is not explained by requests x surge",
                context={"figure": figure, "expected": expected, "baseline": baseline, "daily": daily},
            )
        )

    # 3. No loss framing for a property that already earns (and vice versa)
    if record.is_earning:
        framing_ok = draft["hourly_loss"] is None and draft["hourly_revenue"] is not None
        framing_ok = framing_ok and draft.get("todays_missed_revenue") is None
    else:
        framing_ok = draft["hourly_revenue"] is None and draft["hourly_loss"] is not None
        framing_ok = framing_ok and draft.get("todays_revenue") is None
    if not framing_ok:
        violations.append(
            InvariantViolation(
                rule="earning_framing",
                message="Loss/revenue framing does not match monetization status",
                context={"monetization_status": record.monetization_status},
            )
        )

    # Prose must repeat the numbers shown next to it
    message = draft["urgency_message"]
    if not message or (str(active) not in message and f"{gen.display_surge(surge):.1f}" not in message):
        violations.append(
            InvariantViolation(
                rule="urgency_numbers",
                message="Urgency message disagrees with displayed counters",
                context={"urgency_message": message, "active_requests": active},
            )
        )

    # 4. Market share is explained by the competitor list
    position = gen.compute_market_position(record, competitors)
    if draft["market_position"] != position:
        violations.append(
            InvariantViolation(
                rule="market_share_explained",
                message="Market share does not follow from competitor tiers",
                context={"market_share": draft["market_position"].market_share},
            )
        )

    return violations


def _force_flight_disruption(flights: tuple[FlightArrival, ...], surge: float) -> tuple[FlightArrival, ...]:
    # busiest flight is the one the dashboard would call out
    target = max(range(len(flights)), key=lambda i: (flights[i].passenger_count, -i))
    delayed = flights[target].model_copy(
        update={"status": "Delayed", "eta_label": f"Delayed {gen.flight_delay_minutes(surge)} min"}
    )
    return flights[:target] + (delayed,) + flights[target + 1:]


def _force_heavy_route(routes: tuple[TrafficCondition, ...]) -> tuple[TrafficCondition, ...]:
    target = max(range(len(routes)), key=lambda i: (routes[i].current_minutes, -i))
    route = routes[target]
    free_flow = route.current_minutes - route.delay_minutes
    delay = max(route.delay_minutes, gen.heavy_delay_minutes(free_flow))
    heavy = route.model_copy(
        update={
            "current_minutes": free_flow + delay,
            "delay_minutes": delay,
            "status": gen.traffic_status(free_flow, delay),
        }
    )
    return routes[:target] + (heavy,) + routes[target + 1:]


def money_fields(record: PropertyRecord, active: int, surge: float) -> dict[str, Any]:
    """Hourly and daily money fields straight from baseline x demand jitter."""
    amount = gen.hourly_amount(record, active, surge)
    daily = gen.todays_figure(amount)
    return {
        "average_ride_value": amount / (active * surge),
        "hourly_revenue": amount if record.is_earning else None,
        "hourly_loss": None if record.is_earning else amount,
        "todays_revenue": daily if record.is_earning else None,
        "todays_missed_revenue": None if record.is_earning else daily,
    }


def plain_urgency_message(record: PropertyRecord, active: int, surge: float) -> str:
    """First template that states the request count; no seeded choice."""
    templates = catalogs.URGENCY_TEMPLATES_EARNING if record.is_earning else catalogs.URGENCY_TEMPLATES_LOSS
    template = next(t for t in templates if "{requests}" in t)
    return template.format(requests=active, surge=f"{gen.display_surge(surge):.1f}")


def apply_corrections(
    record: PropertyRecord,
    draft: dict[str, Any],
    violations: Sequence[InvariantViolation],
    competitors: Sequence[PropertyRecord],
) -> dict[str, Any]:
    """
    Re-derive each offending field from the fields already fixed.

    No new randomness is introduced here, so a corrected snapshot is exactly
    as reproducible as an uncorrected one.
    """
    surge = draft["current_surge"]
    active = draft["active_requests"]

    for v in violations:
        if v.rule == "high_surge_flights":
            draft["flight_arrivals"] = _force_flight_disruption(draft["flight_arrivals"], surge)
        elif v.rule == "high_surge_traffic":
            draft["traffic_conditions"] = _force_heavy_route(draft["traffic_conditions"])
        elif v.rule in ("hourly_proportionality", "earning_framing"):
            draft.update(money_fields(record, active, surge))
        elif v.rule == "urgency_numbers":
            draft["urgency_message"] = plain_urgency_message(record, active, surge)
        elif v.rule == "market_share_explained":
            draft["market_position"] = gen.compute_market_position(record, competitors)

    draft["corrections"] = tuple(draft.get("corrections", ())) + tuple(v.rule for v in violations)
    return draft
