# src/hotelpulse/domain/catalogs.py
"""
Fixed pools the generators draw from.

Every urgency template carries at least one of {requests} / {surge}, so the
prose always repeats a number that is shown elsewhere on the same screen.
"""
from __future__ import annotations

# -----------------------------
# Urgency messaging
# -----------------------------

URGENCY_TEMPLATES_LOSS: tuple[str, ...] = (
    "{requests} guests requested rides in the last hour",
    "Airport surge at {surge}x - guests paying premium right now",
    "{requests} ride requests went to competitors this hour",
    "Guests facing {surge}x surge pricing to the airport",
    "{requests} guests waiting on rideshare at {surge}x surge",
    "Surge just hit {surge}x - {requests} guests affected",
)

URGENCY_TEMPLATES_EARNING: tuple[str, ...] = (
    "Capturing surge revenue at {surge}x",
    "{requests} guest rides booked through your property this hour",
    "Guests skipped {surge}x surge pricing with your fleet",
    "{requests} requests served while competitors hit {surge}x surge",
)

# -----------------------------
# Guest feedback
# -----------------------------

COMPLAINT_TEMPLATES: tuple[str, ...] = (
    "{competitor} offers instant luxury rides but {hotel} doesn't",
    "Had to pay ${surge_price} for Uber during surge pricing",
    "Why doesn't {hotel} have instant rides like other hotels?",
    "Disappointed {hotel} doesn't offer Tesla service",
    "Lost a group booking to {competitor} because they have transportation",
    "Convention attendees complaining about surge pricing",
    "Business travelers prefer hotels with guaranteed ride pricing",
    "Parents weekend created surge pricing nightmares",
    "Game day transportation was impossible",
    "Airport surge pricing cost more than the room",
    "Other hotels in the area offer complimentary luxury rides",
    "Spent ${surge_price} just to get to the airport",
    "My company is moving all bookings to hotels with instant rides",
    "The {competitor} picked us up in a Tesla Model S",
    "Missed my flight waiting for affordable transportation",
)

PRAISE_TEMPLATES: tuple[str, ...] = (
    "{hotel} had a Tesla waiting for us at the curb",
    "Skipped a ${surge_price} surge fare thanks to the hotel rides",
    "Instant airport pickup was the best part of our stay at {hotel}",
    "Booked our whole group at {hotel} because of the ride service",
    "Guaranteed ride pricing made the conference trip painless",
)

DEFAULT_COMPETITOR_NAME = "Four Seasons"

# Typical non-surge fare for a hotel-to-airport ride, in dollars
BASE_FARE = 45

# -----------------------------
# Flights
# -----------------------------

AIRLINES: tuple[str, ...] = ("AA", "WN", "UA", "DL", "AS", "F9", "NK", "B6")

ORIGINS: tuple[str, ...] = (
    "LAX", "SFO", "SEA", "DEN", "ORD", "DFW", "JFK", "ATL",
    "LAS", "SAN", "BOS", "MSP", "SLC", "IAH", "PDX",
)

FLIGHT_STATUSES: tuple[str, ...] = ("On Time", "Delayed", "Cancelled")

# -----------------------------
# Traffic
# -----------------------------

# (route label, free-flow minutes)
ROUTES_BY_CITY: dict[str, tuple[tuple[str, int], ...]] = {
    "Phoenix": (
        ("PHX Sky Harbor", 12),
        ("I-10 West", 18),
        ("SR-51 North", 15),
        ("I-17 Downtown", 14),
        ("Loop 202 East", 20),
        ("Camelback Rd", 16),
    ),
    "Scottsdale": (
        ("PHX Sky Harbor", 22),
        ("Loop 101 North", 18),
        ("Scottsdale Rd", 14),
        ("SR-51 South", 20),
        ("Loop 202 West", 24),
        ("Old Town", 10),
    ),
    "Paradise Valley": (
        ("PHX Sky Harbor", 20),
        ("Lincoln Dr", 12),
        ("SR-51 South", 17),
        ("Tatum Blvd", 14),
        ("Scottsdale Rd", 15),
    ),
    "Tempe": (
        ("PHX Sky Harbor", 10),
        ("Loop 202 West", 12),
        ("Mill Ave", 8),
        ("US-60 East", 16),
        ("Loop 101 South", 18),
        ("ASU Campus", 7),
    ),
    "Chandler": (
        ("PHX Sky Harbor", 24),
        ("I-10 North", 20),
        ("Loop 202 Santan", 18),
        ("Chandler Blvd", 12),
        ("Loop 101 Price", 15),
    ),
}

DEFAULT_ROUTES: tuple[tuple[str, int], ...] = (
    ("Airport", 18),
    ("Interstate", 20),
    ("Downtown", 12),
    ("Convention Center", 14),
    ("Business District", 16),
)

TRAFFIC_STATUSES: tuple[str, ...] = ("Light", "Moderate", "Heavy")

# -----------------------------
# Drivers
# -----------------------------

DRIVER_NAMES: tuple[str, ...] = (
    "Marcus T.", "Sarah L.", "David K.", "Jessica M.", "Andre W.",
    "Priya S.", "Tom R.", "Elena G.", "Kevin B.", "Nora H.",
)

VEHICLES: tuple[str, ...] = (
    "Tesla Model S", "Mercedes S-Class", "BMW 7 Series", "Tesla Model X",
    "Cadillac Escalade", "Lincoln Navigator", "Audi A8",
)

# -----------------------------
# Surge events
# -----------------------------

SURGE_EVENT_TYPES: tuple[str, ...] = (
    "Suns game",
    "Convention let-out",
    "Concert at Footprint Center",
    "Spring training",
    "ASU graduation",
    "Sky Harbor evening bank",
)

# -----------------------------
# Live feed
# -----------------------------

LIVE_EVENT_TYPES: tuple[str, ...] = (
    "ride.started",
    "ride.completed",
    "driver.online",
    "hotel.signup",
    "instant.triggered",
    "revenue.milestone",
)

# local (non-airport) ride destinations
RIDE_DESTINATIONS: tuple[str, ...] = (
    "Restaurant", "Old Town", "Convention Center", "Chase Field",
    "Spring training complex", "Golf club", "Spa resort",
)

# (low, high) fare in dollars before surge
LOCAL_FARE_RANGE = (25.0, 40.0)
AIRPORT_FARE_RANGE = (55.0, 85.0)

REVENUE_MILESTONES: tuple[int, ...] = (10_000, 25_000, 50_000, 100_000)

AIRPORT_TERMINALS: tuple[str, ...] = ("Sky Harbor T3", "Sky Harbor T4")
