# tests/test_directory.py
import pandas as pd
import pytest

from hotelpulse.adapters.directory import (
    FALLBACK_COMPETITORS,
    FALLBACK_MONTHLY_POTENTIAL,
    PropertyDirectory,
    fallback_for,
    load_directory,
)
from hotelpulse.adapters.storage import write_df
from hotelpulse.domain.errors import DirectoryMiss
from hotelpulse.domain.property import PropertyRecord


def test_builtin_directory_loads_all_properties(directory):
    assert len(directory) == 33
    assert "SCF0004OM" in directory
    assert directory.is_valid("SCF0001PH")


def test_lookup_known_property(directory):
    rec = directory.lookup("SCF0004OM")
    assert rec is not None
    assert rec.name == "Omni Scottsdale Resort & Spa"
    assert rec.tier == "STANDARD"
    # legacy LOSING_MONEY status reads as not earning
    assert rec.monetization_status == "NOT_EARNING"
    assert rec.monthly_potential == 67433
    assert rec.competitor_identifiers == ("SCF0001PH", "SCF0002FS", "SCF0003FM")


def test_unknown_code_resolves_to_fallback(directory):
    assert directory.lookup("DOES-NOT-EXIST") is None
    rec = directory.resolve("DOES-NOT-EXIST")
    assert rec.identifier == "DOES-NOT-EXIST"
    assert rec.name == "Your Property"
    assert rec.tier == "BASIC"
    assert rec.monetization_status == "NOT_EARNING"
    assert rec.monthly_revenue == 0
    assert rec.monthly_potential == FALLBACK_MONTHLY_POTENTIAL
    assert rec.competitor_identifiers == FALLBACK_COMPETITORS
    assert len(rec.seed_complaints) == 3


def test_fallback_never_lists_itself_as_competitor():
    rec = fallback_for("SCF0002FS")
    assert "SCF0002FS" not in rec.competitor_identifiers
    assert rec.competitor_identifiers == ("SCF0001PH", "SCF0003FM")


def test_require_raises_directory_miss(directory):
    with pytest.raises(DirectoryMiss) as exc:
        directory.require("NOPE")
    assert exc.value.identifier == "NOPE"
    assert isinstance(exc.value, LookupError)


def test_search_by_chain_code(directory):
    assert directory.search("OM") == ["SCF0004OM", "TMP0001OM"]
    assert directory.search("om") == ["SCF0004OM", "TMP0001OM"]


def test_search_by_city_prefix_and_name(directory):
    tempe = directory.search("TMP", limit=50)
    assert tempe and all(code.startswith("TMP") for code in tempe)

    by_name = directory.search("phoenician")
    assert "SCF0001PH" in by_name

    assert directory.search("   ") == []
    assert len(directory.search("SCF", limit=2)) == 2


def test_records_are_frozen(directory):
    rec = directory.require("SCF0001PH")
    with pytest.raises(Exception):
        rec.name = "Something Else"


def test_revenue_is_zeroed_when_not_earning():
    rec = PropertyRecord(
        identifier="TEST-PHX-001",
        name="Test Hotel",
        monetization_status="NOT_ACTIVATED",
        monthly_revenue=5000,
        monthly_potential=67433,
    )
    assert rec.monetization_status == "NOT_EARNING"
    assert rec.monthly_revenue == 0
    assert rec.monthly_figure == 67433


def test_from_frame_parses_list_and_int_columns(tmp_path):
    df = pd.DataFrame(
        [
            {
                "identifier": "PHX9001AA",
                "name": "Alpha Inn",
                "city": "Phoenix",
                "tier": "standard",
                "monetization_status": "ALREADY_EARNING",
                "monthly_revenue": "41000",
                "monthly_potential": "",
                "missed_bookings": "",
                "competitor_identifiers": "PHX9002BB|PHX9003CC",
                "seed_complaints": "",
            },
            {
                "identifier": "PHX9002BB",
                "name": "Bravo Suites",
                "city": "Phoenix",
                "tier": "BASIC",
                "monetization_status": "LOSING_MONEY",
                "monthly_revenue": "",
                "monthly_potential": "52000",
                "missed_bookings": "310",
                "competitor_identifiers": "PHX9001AA",
                "seed_complaints": "No shuttle at all|Waited 40 minutes",
            },
        ]
    )
    path = tmp_path / "data" / "directory.csv"
    write_df(df, str(path))

    loaded = load_directory(str(path))
    assert len(loaded) == 2

    alpha = loaded.require("PHX9001AA")
    assert alpha.tier == "STANDARD"
    assert alpha.is_earning
    assert alpha.monthly_revenue == 41000
    assert alpha.monthly_potential == 0
    assert alpha.competitor_identifiers == ("PHX9002BB", "PHX9003CC")
    assert alpha.seed_complaints == ()

    bravo = loaded.require("PHX9002BB")
    assert not bravo.is_earning
    assert bravo.missed_bookings == 310
    assert bravo.seed_complaints == ("No shuttle at all", "Waited 40 minutes")

    # city prefixes still work for a loaded table
    assert loaded.search("PHX") == ["PHX9001AA", "PHX9002BB"]


def test_load_directory_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_directory(str(tmp_path / "missing.csv"))


def test_from_rows_builds_directory():
    d = PropertyDirectory.from_rows([{"identifier": "X1", "name": "X"}])
    assert d.identifiers() == ["X1"]
    assert d.require("X1").tier == "BASIC"
