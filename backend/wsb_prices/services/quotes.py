import logging
from typing import Optional

import httpx

from wsb_prices.schemas import Quote
from wsb_prices.services.mock_prices import fetch_mock_price
from wsb_prices.services.yahoo_api import PriceFetchError, fetch_yahoo_price


logger = logging.getLogger(__name__)

__all__ = ["PriceFetchError", "fetch_price"]


async def fetch_price(symbol: str, source: str, client: Optional[httpx.AsyncClient] = None) -> Quote:
    """Route a lookup to the requested source; unknown sources get mock data."""
    key = (source or "").strip().lower()
    if key == "yahoo":
        return await fetch_yahoo_price(symbol, client=client)
    if key == "mock":
        return await fetch_mock_price(symbol)
    logger.warning("Unknown source: %s, falling back to mock", source)
    return await fetch_mock_price(symbol)
