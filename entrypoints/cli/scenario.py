from __future__ import annotations

import asyncio
import json
from typing import Optional

import typer
from loguru import logger

from hotelpulse.adapters.config import config
from hotelpulse.adapters.directory import default_directory
from hotelpulse.domain.snapshot import MetricSnapshot
from hotelpulse.services.refresh import RefreshDriver
from hotelpulse.services.scenarios import market_overview, snapshot_for

app = typer.Typer(help="hotelpulse live scenario engine (search, snapshot, watch, market).")


def _dump(snapshot: MetricSnapshot) -> str:
    return json.dumps(snapshot.model_dump(mode="json"), indent=2)


@app.command()
def search(
    query: str = typer.Argument(..., help="Chain code (OM), city prefix (PHX), or name fragment"),
    limit: int = typer.Option(10, help="Max matches"),
) -> None:
    """
    List property codes matching a query.
    """
    for code in default_directory.search(query, limit=limit):
        rec = default_directory.require(code)
        typer.echo(f"{code}\t{rec.name}\t{rec.tier}\t{rec.monetization_status}")


@app.command()
def snapshot(
    code: str = typer.Argument(..., help="Property code, e.g. SCF0004OM"),
    bucket: Optional[int] = typer.Option(None, help="Time bucket (default: current)"),
) -> None:
    """
    Print one snapshot as JSON.
    """
    snap, is_fallback = snapshot_for(code, bucket=bucket)
    if is_fallback:
        logger.warning("{} is not in the directory; using fallback record", code)
    typer.echo(_dump(snap))


@app.command()
def watch(
    code: str = typer.Argument(..., help="Property code"),
    interval_ms: int = typer.Option(config.REFRESH_INTERVAL_MS, "--interval-ms", help="Refresh interval"),
    ticks: int = typer.Option(5, help="Number of snapshots before stopping"),
    fallback: bool = typer.Option(False, "--fallback", help="Run unknown codes on the fallback record"),
) -> None:
    """
    Run a live refresh subscription and print a line per tick.
    """

    async def _run() -> None:
        done = asyncio.Event()
        seen = 0
        driver = RefreshDriver(use_fallback=fallback)

        def on_snapshot(s: MetricSnapshot) -> None:
            nonlocal seen
            seen += 1
            money = f"loss ${s.hourly_loss:,.2f}/h" if s.hourly_loss is not None else f"earned ${s.hourly_revenue:,.2f}/h"
            typer.echo(
                f"[{seen}] bucket={s.time_bucket} requests={s.active_requests} "
                f"surge={s.display_surge:.1f}x drivers={s.fleet.drivers_online} {money} | {s.urgency_message}"
            )
            if seen >= ticks:
                driver.stop()
                done.set()

        def on_not_found(identifier: str) -> None:
            logger.error("Unknown property code {}", identifier)
            done.set()

        driver.start(code, on_snapshot, interval_ms, on_not_found=on_not_found)
        await done.wait()
        if driver.running:
            driver.stop()

    asyncio.run(_run())


@app.command()
def market(
    bucket: Optional[int] = typer.Option(None, help="Time bucket (default: current)"),
) -> None:
    """
    Summarize the live scenario across the whole directory.
    """
    summary = market_overview(bucket=bucket)
    logger.info("Market summary over {} properties", summary.n_properties)
    typer.echo(json.dumps(summary.to_dict(), indent=2))


if __name__ == "__main__":
    app()
