import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from wsb_prices.schemas import Quote
from wsb_prices.settings import settings
from wsb_prices.utils.helpers import epoch_now, round_or_none, round_price


logger = logging.getLogger(__name__)


class PriceFetchError(Exception):
    """A quote could not be produced for a symbol."""


def _headers() -> Dict[str, str]:
    return {
        "accept": "application/json",
        "user-agent": settings.UPSTREAM_USER_AGENT,
    }


async def _get(client: httpx.AsyncClient, path: str) -> Any:
    try:
        r = await client.get(path, headers=_headers())
    except httpx.TimeoutException as exc:
        raise PriceFetchError("request timed out") from exc
    except httpx.HTTPError as exc:
        raise PriceFetchError(str(exc) or exc.__class__.__name__) from exc
    if r.status_code != 200:
        raise PriceFetchError(f"HTTP error: {r.status_code}")
    try:
        return r.json()
    except ValueError as exc:
        raise PriceFetchError("Invalid response format") from exc


def new_client(max_connections: Optional[int] = None) -> httpx.AsyncClient:
    """Client against the chart API; max_connections=None leaves the pool unbounded."""
    return httpx.AsyncClient(
        base_url=settings.YAHOO_CHART_BASE,
        timeout=settings.UPSTREAM_TIMEOUT_SECONDS,
        limits=httpx.Limits(
            max_connections=max_connections,
            max_keepalive_connections=max_connections,
        ),
    )


def parse_chart(symbol: str, data: Any) -> Quote:
    """Map a v8 chart payload onto a Quote, rejecting anything off-shape."""
    result = None
    if isinstance(data, dict):
        chart = data.get("chart")
        results = chart.get("result") if isinstance(chart, dict) else None
        if isinstance(results, list) and results:
            result = results[0]
    if not isinstance(result, dict):
        raise PriceFetchError("Invalid response format")

    meta = result.get("meta")
    if not isinstance(meta, dict):
        raise PriceFetchError("Missing meta data")

    price = meta.get("regularMarketPrice")
    if price is None or isinstance(price, bool) or not isinstance(price, (int, float)):
        raise PriceFetchError("Missing price data")

    return Quote(
        symbol=symbol,
        price=round_price(price),
        currency=meta.get("currency") or "USD",
        timestamp=epoch_now(),
        source="yahoo",
        change_24h=round_or_none(meta.get("regularMarketChange")),
        change_percent_24h=round_or_none(meta.get("regularMarketChangePercent")),
    )


async def fetch_yahoo_price(symbol: str, client: Optional[httpx.AsyncClient] = None) -> Quote:
    # Symbol is a single path segment; ?, # and / must not reshape the URL
    path = f"/v8/finance/chart/{quote(symbol, safe='')}"
    try:
        if client is None:
            async with new_client() as own:
                data = await _get(own, path)
        else:
            data = await _get(client, path)
        return parse_chart(symbol, data)
    except PriceFetchError as exc:
        raise PriceFetchError(f"Yahoo API error: {exc}") from exc
