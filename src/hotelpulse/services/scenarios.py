# src/hotelpulse/services/scenarios.py
from __future__ import annotations

import time
from typing import Any, Dict, List

from hotelpulse.adapters.config import config
from hotelpulse.adapters.directory import PropertyDirectory, default_directory
from hotelpulse.domain.metrics import MarketSummary, summarize_market
from hotelpulse.domain.seeding import seed_for, time_bucket
from hotelpulse.domain.snapshot import MetricSnapshot
from hotelpulse.services.aggregator import ScenarioAggregator


def current_bucket(now: float | None = None) -> int:
    return time_bucket(time.time() if now is None else now, config.BUCKET_SECONDS)


def snapshot_for(
    identifier: str,
    *,
    bucket: int | None = None,
    directory: PropertyDirectory | None = None,
) -> tuple[MetricSnapshot, bool]:
    """
    Snapshot for one property code at a bucket (the current one by default).

    Unknown codes run on the fallback record, so every page can render
    something. Returns (snapshot, is_fallback).
    """
    directory = directory or default_directory
    is_fallback = not directory.is_valid(identifier)
    record = directory.resolve(identifier)
    b = current_bucket() if bucket is None else bucket
    snapshot = ScenarioAggregator(directory).aggregate(record, seed_for(identifier, b))
    return snapshot, is_fallback


def market_snapshots(
    *,
    bucket: int | None = None,
    directory: PropertyDirectory | None = None,
) -> List[MetricSnapshot]:
    directory = directory or default_directory
    b = current_bucket() if bucket is None else bucket
    aggregator = ScenarioAggregator(directory)
    return [
        aggregator.aggregate(directory.resolve(code), seed_for(code, b))
        for code in directory.identifiers()
    ]


def market_overview(
    *,
    bucket: int | None = None,
    directory: PropertyDirectory | None = None,
) -> MarketSummary:
    return summarize_market(market_snapshots(bucket=bucket, directory=directory))


def competitor_cards(identifier: str, *, directory: PropertyDirectory | None = None) -> List[Dict[str, Any]]:
    """
    Competitor panel rows: name, tier and the monthly ride revenue label
    ("$87K/mo" for an earning competitor, "$0/mo" otherwise).
    """
    directory = directory or default_directory
    record = directory.resolve(identifier)
    cards: List[Dict[str, Any]] = []
    for code in record.competitor_identifiers:
        comp = directory.lookup(code)
        if comp is None:
            continue
        revenue = f"${comp.monthly_revenue / 1000:.0f}K/mo" if comp.is_earning else "$0/mo"
        cards.append(
            {
                "identifier": comp.identifier,
                "name": comp.name,
                "tier": comp.tier,
                "revenue": revenue,
                "earning": comp.is_earning,
            }
        )
    return cards
