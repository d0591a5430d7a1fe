import httpx
import pytest
import respx

from wsb_prices.main import create_app
from yahoo_payloads import chart_payload


YAHOO = "https://query1.finance.yahoo.com/v8/finance/chart"

pytestmark = pytest.mark.anyio


async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "healthy"
    assert body["service"]
    assert body["timestamp"]


async def test_groups_are_stable(client):
    first = await client.get("/groups")
    second = await client.get("/groups")
    assert first.status_code == 200
    assert first.json() == second.json()
    groups = first.json()
    assert set(groups) == {"tech", "finance", "healthcare", "energy", "retail", "crypto"}
    assert groups["tech"]["symbols"][0] == "AAPL"
    assert all(len(g["symbols"]) == 8 for g in groups.values())


async def test_single_price_mock(client):
    resp = await client.get("/price/aapl", params={"source": "mock"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["symbol"] == "AAPL"
    assert body["source"] == "mock"
    assert body["currency"] == "USD"
    assert isinstance(body["timestamp"], int)


async def test_single_price_unknown_source_falls_back_to_mock(client):
    resp = await client.get("/price/TSLA", params={"source": "alpha_vantage"})
    assert resp.status_code == 200
    assert resp.json()["source"] == "mock"


async def test_single_price_yahoo(client):
    with respx.mock(assert_all_called=True) as rs:
        rs.get(f"{YAHOO}/MSFT").respond(200, json=chart_payload(price=411.456))
        resp = await client.get("/price/MSFT", params={"source": "yahoo"})

    assert resp.status_code == 200
    body = resp.json()
    assert body == {
        "symbol": "MSFT",
        "price": 411.46,
        "currency": "USD",
        "timestamp": body["timestamp"],
        "source": "yahoo",
        "change_24h": 1.23,
        "change_percent_24h": 0.65,
    }


async def test_single_price_upstream_error_is_400(client):
    with respx.mock as rs:
        rs.get(f"{YAHOO}/NOPE").respond(404, json={"chart": {"result": None}})
        resp = await client.get("/price/nope", params={"source": "yahoo"})

    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "PRICE_FETCH_FAILED"
    assert body["message"] == "Failed to fetch price for NOPE: Yahoo API error: HTTP error: 404"


async def test_single_price_timeout_is_still_400(client):
    with respx.mock as rs:
        rs.get(f"{YAHOO}/AAPL").mock(side_effect=httpx.ReadTimeout("slow"))
        resp = await client.get("/price/AAPL", params={"source": "yahoo"})

    assert resp.status_code == 400
    assert "request timed out" in resp.json()["message"]


async def test_prices_mock_batch(client):
    resp = await client.get("/prices", params={"symbols": "AAPL,TSLA,MSFT", "source": "mock"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["total_requested"] == 3
    assert body["total_successful"] == 3
    assert body["total_failed"] == 0
    assert body["errors"] == []
    assert {p["symbol"] for p in body["prices"]} == {"AAPL", "TSLA", "MSFT"}


async def test_prices_missing_symbols(client):
    resp = await client.get("/prices")
    assert resp.status_code == 400
    assert resp.json()["error"] == "MISSING_SYMBOLS"


async def test_prices_empty_symbols_counts_as_missing(client):
    resp = await client.get("/prices", params={"symbols": ""})
    assert resp.status_code == 400
    assert resp.json()["error"] == "MISSING_SYMBOLS"


async def test_prices_messy_separators(client):
    resp = await client.get("/prices", params={"symbols": "AAPL, , TSLA", "source": "mock"})
    body = resp.json()
    assert body["total_requested"] == 2
    assert sorted(p["symbol"] for p in body["prices"]) == ["AAPL", "TSLA"]


async def test_prices_partial_failure(client):
    with respx.mock as rs:
        rs.get(f"{YAHOO}/AAPL").respond(200, json=chart_payload())
        rs.get(f"{YAHOO}/TSLA").mock(side_effect=httpx.ConnectTimeout("slow"))
        resp = await client.get("/prices", params={"symbols": "AAPL TSLA", "source": "yahoo"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert [p["symbol"] for p in body["prices"]] == ["AAPL"]
    assert body["errors"] == ["TSLA: Yahoo API error: request timed out"]
    assert body["total_requested"] == 2
    assert body["total_successful"] == 1
    assert body["total_failed"] == 1


async def test_frontend_catch_all(client):
    for path in ("/", "/dashboard", "/some/deep/link"):
        resp = await client.get(path)
        assert resp.status_code == 200
        assert "wsb frontend" in resp.text


async def test_static_assets(client):
    resp = await client.get("/static/style.css")
    assert resp.status_code == 200
    assert "margin" in resp.text


async def test_unknown_api_path_is_not_frontend(client):
    resp = await client.get("/price/")
    assert resp.status_code == 404
    assert resp.json()["error"] == "NOT_FOUND"

    resp = await client.get("/api/unknown")
    assert resp.status_code == 404


async def test_responses_carry_process_time(client):
    resp = await client.get("/health")
    assert float(resp.headers["x-process-time-ms"]) >= 0


async def test_symbol_cannot_smuggle_upstream_query(client):
    with respx.mock as rs:
        route = rs.get(host="query1.finance.yahoo.com").respond(404)
        resp = await client.get("/price/AAPL%3Frange=1d", params={"source": "yahoo"})

    assert resp.status_code == 400
    assert resp.json()["error"] == "PRICE_FETCH_FAILED"
    sent = route.calls.last.request.url
    assert sent.query == b""
    assert sent.raw_path == b"/v8/finance/chart/AAPL%3FRANGE%3D1D"


async def test_missing_frontend_is_404(tmp_path):
    app = create_app(static_dir=str(tmp_path / "missing"))
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        resp = await c.get("/dashboard")
        health = await c.get("/health")

    assert resp.status_code == 404
    assert resp.json()["error"] == "FRONTEND_NOT_FOUND"
    assert health.status_code == 200
