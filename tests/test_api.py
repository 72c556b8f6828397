# tests/test_api.py
def test_search_by_chain_code(client):
    resp = client.get("/properties", params={"q": "OM"})
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert [row["identifier"] for row in data] == ["SCF0004OM", "TMP0001OM"]
    assert data[0]["monetization_status"] == "NOT_EARNING"


def test_search_requires_query(client):
    resp = client.get("/properties")
    assert resp.status_code == 422


def test_get_property(client):
    resp = client.get("/properties/SCF0001PH")
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "The Phoenician"
    assert body["tier"] == "PREMIUM"


def test_unknown_property_is_404(client):
    resp = client.get("/properties/DOES-NOT-EXIST")
    assert resp.status_code == 404


def test_snapshot_is_deterministic_per_bucket(client):
    r1 = client.get("/properties/SCF0004OM/snapshot", params={"bucket": 340000000})
    r2 = client.get("/properties/SCF0004OM/snapshot", params={"bucket": 340000000})
    assert r1.status_code == 200, r1.text
    assert r1.json() == r2.json()

    body = r1.json()
    assert body["is_fallback"] is False
    snap = body["snapshot"]
    assert snap["identifier"] == "SCF0004OM"
    assert snap["time_bucket"] == 340000000
    assert snap["hourly_revenue"] is None
    assert snap["hourly_loss"] > 0
    assert snap["todays_revenue"] is None
    assert snap["todays_missed_revenue"] > 0
    assert len(snap["live_events"]) == 5
    assert snap["live_events"][0]["time_bucket"] == 340000000
    assert 10 <= snap["active_requests"] <= 45


def test_snapshot_for_unknown_code_uses_fallback(client):
    resp = client.get("/properties/DOES-NOT-EXIST/snapshot", params={"bucket": 1})
    assert resp.status_code == 200
    body = resp.json()
    assert body["is_fallback"] is True
    assert body["snapshot"]["monetization_status"] == "NOT_EARNING"
    assert body["snapshot"]["hourly_loss"] is not None


def test_competitor_cards(client):
    resp = client.get("/properties/SCF0004OM/competitors")
    assert resp.status_code == 200
    cards = resp.json()
    assert [c["identifier"] for c in cards] == ["SCF0001PH", "SCF0002FS", "SCF0003FM"]
    assert cards[0]["revenue"] == "$87K/mo"
    assert all(c["earning"] for c in cards)


def test_market_summary_covers_directory(client):
    resp = client.get("/market/summary", params={"bucket": 340000000})
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["time_bucket"] == 340000000
    assert body["n_properties"] == 33
    assert 0 <= body["n_earning"] <= 33
    assert 1.0 <= body["mean_surge"] <= 3.5
    assert 0.0 <= body["high_surge_share"] <= 1.0
    assert body["total_hourly_loss"] > 0
