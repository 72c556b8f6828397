# src/hotelpulse/api/http.py
from __future__ import annotations

import math

from fastapi import FastAPI, HTTPException, Query

from hotelpulse.adapters.directory import default_directory
from hotelpulse.domain.errors import DirectoryMiss
from hotelpulse.domain.property import PropertyRecord
from hotelpulse.services.scenarios import competitor_cards, current_bucket, market_overview, snapshot_for
from .schemas import CompetitorCard, MarketSummaryResponse, PropertySummary, SnapshotResponse

app = FastAPI(title="hotelpulse")

_directory = default_directory


@app.get("/properties", response_model=list[PropertySummary])
def search_properties(
    q: str = Query(..., min_length=1, description="Chain code, city prefix, or name fragment"),
    limit: int = Query(10, ge=1, le=50),
) -> list[PropertySummary]:
    out: list[PropertySummary] = []
    for code in _directory.search(q, limit=limit):
        rec = _directory.require(code)
        out.append(
            PropertySummary(
                identifier=rec.identifier,
                name=rec.name,
                city=rec.city,
                tier=rec.tier,
                monetization_status=rec.monetization_status,
            )
        )
    return out


@app.get("/properties/{code}", response_model=PropertyRecord)
def get_property(code: str) -> PropertyRecord:
    """Strict lookup: unknown codes are a 404 here, unlike the snapshot endpoint."""
    try:
        return _directory.require(code)
    except DirectoryMiss as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@app.get("/properties/{code}/snapshot", response_model=SnapshotResponse)
def get_snapshot(
    code: str,
    bucket: int | None = Query(None, description="Time bucket; current bucket when omitted"),
) -> SnapshotResponse:
    snapshot, is_fallback = snapshot_for(code, bucket=bucket, directory=_directory)
    return SnapshotResponse(is_fallback=is_fallback, snapshot=snapshot)


@app.get("/properties/{code}/competitors", response_model=list[CompetitorCard])
def get_competitors(code: str) -> list[CompetitorCard]:
    return [CompetitorCard(**card) for card in competitor_cards(code, directory=_directory)]


@app.get("/market/summary", response_model=MarketSummaryResponse)
def get_market_summary(bucket: int | None = Query(None)) -> MarketSummaryResponse:
    b = current_bucket() if bucket is None else bucket
    summary = market_overview(bucket=b, directory=_directory).to_dict()
    # NaN does not survive JSON; an empty directory reports nulls instead
    clean = {k: (None if isinstance(v, float) and math.isnan(v) else v) for k, v in summary.items()}
    return MarketSummaryResponse(time_bucket=b, **clean)
