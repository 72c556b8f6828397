from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Sequence

import numpy as np

from hotelpulse.domain.snapshot import HIGH_SURGE_THRESHOLD, MetricSnapshot


@dataclass
class MarketSummary:
    """
    Aggregated live stats across a batch of property snapshots.

    This is the 'reduction' result of a map-style per-property aggregation.
    """
    n_properties: int
    n_earning: int
    mean_surge: float
    p50_surge: float
    p95_surge: float
    mean_active_requests: float
    p50_active_requests: float
    p95_active_requests: float
    total_hourly_loss: float
    total_hourly_revenue: float
    high_surge_share: float  # fraction of properties above the disruption threshold

    def to_dict(self) -> dict:
        return asdict(self)


def summarize_market(snapshots: Sequence[MetricSnapshot], high_surge: float = HIGH_SURGE_THRESHOLD) -> MarketSummary:
    """
    Reduction step: collapse per-property snapshots into market-wide stats.
    """
    n = len(snapshots)

    if n == 0:
        # Degenerate case: nothing to summarize.
        return MarketSummary(
            n_properties=0,
            n_earning=0,
            mean_surge=float("nan"),
            p50_surge=float("nan"),
            p95_surge=float("nan"),
            mean_active_requests=float("nan"),
            p50_active_requests=float("nan"),
            p95_active_requests=float("nan"),
            total_hourly_loss=0.0,
            total_hourly_revenue=0.0,
            high_surge_share=0.0,
        )

    surge = np.asarray([s.current_surge for s in snapshots], dtype=float)
    requests = np.asarray([s.active_requests for s in snapshots], dtype=float)
    loss = np.asarray([s.hourly_loss or 0.0 for s in snapshots], dtype=float)
    revenue = np.asarray([s.hourly_revenue or 0.0 for s in snapshots], dtype=float)

    return MarketSummary(
        n_properties=n,
        n_earning=int(sum(1 for s in snapshots if s.monetization_status == "ALREADY_EARNING")),
        mean_surge=float(np.mean(surge)),
        p50_surge=float(np.quantile(surge, 0.50)),
        p95_surge=float(np.quantile(surge, 0.95)),
        mean_active_requests=float(np.mean(requests)),
        p50_active_requests=float(np.quantile(requests, 0.50)),
        p95_active_requests=float(np.quantile(requests, 0.95)),
        total_hourly_loss=round(float(np.sum(loss)), 2),
        total_hourly_revenue=round(float(np.sum(revenue)), 2),
        high_surge_share=float(np.mean(surge > high_surge)),
    )
