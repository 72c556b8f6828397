# src/hotelpulse/api/schemas.py
from __future__ import annotations

from pydantic import BaseModel
from pydantic import ConfigDict

from hotelpulse.domain.property import MonetizationStatus, Tier
from hotelpulse.domain.snapshot import MetricSnapshot


# --------------------------------------------
# Directory
# --------------------------------------------

class PropertySummary(BaseModel):
    """Search result row for the property picker."""
    identifier: str
    name: str
    city: str
    tier: Tier
    monetization_status: MonetizationStatus


class CompetitorCard(BaseModel):
    identifier: str
    name: str
    tier: Tier
    revenue: str
    earning: bool


# --------------------------------------------
# Live scenario
# --------------------------------------------

class SnapshotResponse(BaseModel):
    """
    Response for /properties/{code}/snapshot.

    is_fallback tells the page the code was unknown and defaults were used.
    """
    model_config = ConfigDict(extra="allow")

    is_fallback: bool
    snapshot: MetricSnapshot


class MarketSummaryResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    time_bucket: int
    n_properties: int
    n_earning: int
    mean_surge: float | None = None
    p50_surge: float | None = None
    p95_surge: float | None = None
    mean_active_requests: float | None = None
    p50_active_requests: float | None = None
    p95_active_requests: float | None = None
    total_hourly_loss: float
    total_hourly_revenue: float
    high_surge_share: float
