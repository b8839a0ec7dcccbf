# backend/tests/test_smoke_endpoints.py
"""
API Smoke Tests - Critical endpoint health checks

Runs against the bundled data file (backend/data/sales.json) so a broken
sample dataset or a renamed route fails CI before deploy.

Run: pytest backend/tests/test_smoke_endpoints.py -m smoke -v
"""
import pytest

from app import create_app

from conftest import BUNDLED_DATA_PATH


@pytest.fixture
def client():
    app = create_app({'SALES_DATA_PATH': str(BUNDLED_DATA_PATH)})
    app.config['TESTING'] = True
    return app.test_client()


@pytest.mark.smoke
def test_smoke_ping(client):
    """Dead-simple connectivity check - no data file required."""
    r = client.get("/api/ping")
    assert r.status_code == 200
    data = r.get_json()
    assert data.get("ok") is True


@pytest.mark.smoke
def test_smoke_health(client):
    """Health check - used by monitoring."""
    r = client.get("/api/health")
    assert r.status_code == 200
    data = r.get_json()
    assert data.get("status") == "ok"
    assert data.get("datasetAvailable") is True
    assert data.get("recordCount") == 12


@pytest.mark.smoke
def test_smoke_states(client):
    """State dropdown - first call the dashboard makes."""
    r = client.get("/api/distinct-values")
    assert r.status_code == 200
    data = r.get_json()
    assert isinstance(data, list)
    assert "California" in data and "Texas" in data
    assert len(data) == len(set(data))


@pytest.mark.smoke
def test_smoke_date_range(client):
    """Date pickers - bounds for the selected state."""
    r = client.get("/api/date-range/California")
    assert r.status_code == 200
    data = r.get_json()
    assert data == {"minDate": "2014-06-09", "maxDate": "2016-06-12"}


@pytest.mark.smoke
def test_smoke_summary(client):
    """Summary - stat cards and every chart."""
    r = client.get("/api/summary")
    assert r.status_code == 200
    data = r.get_json()
    for key in (
        "totalSales", "quantitySold", "discountPercentage", "totalProfit",
        "salesByCity", "salesByProducts", "salesByCategory",
        "salesBySubCategory", "salesBySegment",
    ):
        assert key in data, f"summary missing {key}"
    assert len(data["salesByProducts"]) == 10
    assert data["quantitySold"] == 45


@pytest.mark.smoke
def test_smoke_legacy_routes(client):
    """Legacy dashboard client routes still resolve."""
    assert client.get("/api/states").status_code == 200
    assert client.get("/api/dateRange/Texas").status_code == 200
    assert client.get("/api/dashboard?state=All%20States").status_code == 200


@pytest.mark.smoke
def test_smoke_health_degraded_without_data(tmp_path):
    app = create_app({'SALES_DATA_PATH': str(tmp_path / "missing.json")})
    r = app.test_client().get("/api/health")
    assert r.status_code == 200
    data = r.get_json()
    assert data["status"] == "degraded"
    assert data["recordCount"] == 0
    assert data["datasetSizeBytes"] is None
