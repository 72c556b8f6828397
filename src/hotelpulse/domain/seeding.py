# src/hotelpulse/domain/seeding.py
from __future__ import annotations

import hashlib
import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence, TypeVar

T = TypeVar("T")

# Width of one time bucket. Two calls inside the same window see the same
# scenario; a new window gives a new but related one.
BUCKET_SECONDS: float = 5.0

_UNIT_SCALE = float(1 << 64)


class Channel(IntEnum):
    """
    Independent draw streams within one seed.

    Two fields only co-vary when the aggregator correlates them on purpose.
    """
    SURGE = 0
    ACTIVE_REQUESTS = 1
    URGENCY = 2
    COMPLAINT = 3
    COMPLAINT_TIME = 4
    FLIGHT_COUNT = 5
    FLIGHT = 6
    FLIGHT_STATUS = 7
    TRAFFIC_COUNT = 8
    TRAFFIC = 9
    TRAFFIC_STATUS = 10
    FLEET = 11
    ROSTER = 12
    SURGE_EVENT = 13
    COMPETITOR = 14
    LIVE_EVENT = 15


@dataclass(frozen=True)
class ScenarioSeed:
    identifier: str
    time_bucket: int
    value: int


def _digest64(*parts: object) -> int:
    text = "\x1f".join(str(p) for p in parts)
    return int.from_bytes(hashlib.blake2b(text.encode("utf-8"), digest_size=8).digest(), "big")


def time_bucket(timestamp: float, width: float = BUCKET_SECONDS) -> int:
    """Quantize a unix timestamp into a bucket index."""
    if width <= 0:
        raise ValueError("bucket width must be positive")
    return int(math.floor(timestamp / width))


def seed_for(identifier: str, bucket: int) -> ScenarioSeed:
    return ScenarioSeed(identifier=identifier, time_bucket=int(bucket), value=_digest64(identifier, int(bucket)))


def unit(seed: ScenarioSeed, channel: int, draw: int = 0) -> float:
    """Uniform value in [0, 1) for (seed, channel, draw)."""
    return _digest64(seed.value, int(channel), int(draw)) / _UNIT_SCALE


def next_in_range(seed: ScenarioSeed, channel: int, lo: float, hi: float, draw: int = 0) -> float:
    if lo > hi:
        raise ValueError(f"empty range [{lo}, {hi}]")
    value = lo + (hi - lo) * unit(seed, channel, draw)
    return min(max(value, lo), hi)


def next_int(seed: ScenarioSeed, channel: int, lo: int, hi: int, draw: int = 0) -> int:
    """Integer in [lo, hi], both ends inclusive."""
    if lo > hi:
        raise ValueError(f"empty range [{lo}, {hi}]")
    span = hi - lo + 1
    return lo + min(int(unit(seed, channel, draw) * span), span - 1)


def pick(seed: ScenarioSeed, channel: int, items: Sequence[T], draw: int = 0) -> T:
    if not items:
        raise ValueError("cannot pick from an empty sequence")
    return items[next_int(seed, channel, 0, len(items) - 1, draw)]


def chance(seed: ScenarioSeed, channel: int, probability: float, draw: int = 0) -> bool:
    return unit(seed, channel, draw) < probability
