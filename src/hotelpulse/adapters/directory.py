# src/hotelpulse/adapters/directory.py
from __future__ import annotations

from typing import Any, Iterable, Mapping

import pandas as pd

from hotelpulse.adapters.config import config
from hotelpulse.adapters.directory_data import ARIZONA_HOTELS, CHAIN_CODES, CITY_PREFIXES
from hotelpulse.adapters.logging_utils import get_logger
from hotelpulse.adapters.storage import read_df
from hotelpulse.domain.errors import DirectoryMiss
from hotelpulse.domain.property import PropertyRecord

logger = get_logger(__name__)

# Conservative stand-in for a property the directory does not know.
FALLBACK_NAME = "Your Property"
FALLBACK_ADDRESS = "123 Main St, Phoenix, AZ"
FALLBACK_MONTHLY_POTENTIAL = 67433
FALLBACK_COMPETITORS: tuple[str, ...] = ("SCF0001PH", "SCF0002FS", "SCF0003FM")
FALLBACK_COMPLAINTS: tuple[str, ...] = (
    "Other hotels offer instant rides",
    "Paid $150 on surge pricing",
    "Why no Tesla service like Four Seasons?",
)

# columns holding ordered lists in a directory table
_LIST_COLUMNS = ("competitor_identifiers", "seed_complaints")
_INT_COLUMNS = ("monthly_potential", "monthly_revenue", "missed_bookings")
LIST_SEPARATOR = "|"


def fallback_for(identifier: str) -> PropertyRecord:
    """
    Record used when a code is missing from the directory.

    Never earning, zero revenue, basic tier: the rest of the engine can treat
    it exactly like a directory record.
    """
    return PropertyRecord(
        identifier=identifier,
        name=FALLBACK_NAME,
        address=FALLBACK_ADDRESS,
        city="Phoenix",
        tier="BASIC",
        monetization_status="NOT_EARNING",
        monthly_potential=FALLBACK_MONTHLY_POTENTIAL,
        monthly_revenue=0,
        competitor_identifiers=tuple(c for c in FALLBACK_COMPETITORS if c != identifier),
        seed_complaints=FALLBACK_COMPLAINTS,
    )


class PropertyDirectory:
    """
    Read-only map of property code -> PropertyRecord.

    Built once; lookups never mutate anything.
    """

    def __init__(
        self,
        records: Iterable[PropertyRecord],
        *,
        chain_codes: Mapping[str, Iterable[str]] | None = None,
        city_prefixes: Iterable[str] = (),
    ) -> None:
        self._records: dict[str, PropertyRecord] = {}
        for rec in records:
            self._records[rec.identifier] = rec
        self._chain_codes = {k.upper(): tuple(v) for k, v in (chain_codes or {}).items()}
        self._city_prefixes = tuple(p.upper() for p in city_prefixes)

    # -----------------------------
    # Construction
    # -----------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[Mapping[str, Any]], **kwargs: Any) -> "PropertyDirectory":
        return cls((PropertyRecord(**dict(r)) for r in rows), **kwargs)

    @classmethod
    def from_frame(cls, df: pd.DataFrame, **kwargs: Any) -> "PropertyDirectory":
        """
        Build from a flat table. List columns hold `|`-separated values;
        blank numeric cells read as 0.
        """
        rows: list[dict[str, Any]] = []
        for raw in df.to_dict(orient="records"):
            row = {k: v for k, v in raw.items() if not _is_blank(v)}
            for col in _LIST_COLUMNS:
                row[col] = _split_list(raw.get(col))
            for col in _INT_COLUMNS:
                row[col] = int(float(row.get(col) or 0))
            rows.append(row)
        return cls.from_rows(rows, **kwargs)

    @classmethod
    def builtin(cls) -> "PropertyDirectory":
        return cls.from_rows(ARIZONA_HOTELS, chain_codes=CHAIN_CODES, city_prefixes=CITY_PREFIXES)

    # -----------------------------
    # Reads
    # -----------------------------

    def lookup(self, identifier: str) -> PropertyRecord | None:
        return self._records.get(identifier)

    def require(self, identifier: str) -> PropertyRecord:
        rec = self.lookup(identifier)
        if rec is None:
            raise DirectoryMiss(identifier)
        return rec

    def fallback_for(self, identifier: str) -> PropertyRecord:
        return fallback_for(identifier)

    def resolve(self, identifier: str) -> PropertyRecord:
        """Directory record, or the fallback record for an unknown code."""
        rec = self.lookup(identifier)
        if rec is not None:
            return rec
        logger.info("directory_miss", extra={"context": {"identifier": identifier}})
        return fallback_for(identifier)

    def is_valid(self, identifier: str) -> bool:
        return identifier in self._records

    def identifiers(self) -> list[str]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._records

    def search(self, query: str, limit: int = 10) -> list[str]:
        """
        Codes matching a chain code, a city prefix, or (otherwise) a substring
        of the code, name or city.
        """
        q = query.upper().strip()
        if not q:
            return []

        if q in self._chain_codes:
            matches = [c for c in self._chain_codes[q] if c in self._records]
        elif q in self._city_prefixes:
            matches = [c for c in self._records if c.startswith(q)]
        else:
            matches = [
                code
                for code, rec in self._records.items()
                if q in code or q in rec.name.upper() or q in rec.city.upper()
            ]
        return matches[:limit]


def _is_blank(v: Any) -> bool:
    if v is None:
        return True
    if isinstance(v, float) and pd.isna(v):
        return True
    return isinstance(v, str) and not v.strip()


def _split_list(v: Any) -> list[str]:
    if hasattr(v, "tolist"):
        # parquet list columns arrive as numpy arrays
        v = v.tolist()
    if isinstance(v, (list, tuple)):
        return [str(x) for x in v]
    if _is_blank(v):
        return []
    return [part.strip() for part in str(v).split(LIST_SEPARATOR) if part.strip()]


def load_directory(path: str | None = None) -> PropertyDirectory:
    """
    Directory from a CSV/parquet table, or the built-in one when no path is set.
    """
    path = path or config.DIRECTORY_PATH
    if not path:
        return PropertyDirectory.builtin()
    df = read_df(path)
    directory = PropertyDirectory.from_frame(df, city_prefixes=CITY_PREFIXES)
    logger.info("directory_loaded", extra={"context": {"path": path, "properties": len(directory)}})
    return directory


default_directory = load_directory()
