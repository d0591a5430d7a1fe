import asyncio
import logging
import re
from typing import List

from wsb_prices.schemas import AggregateResult, Quote
from wsb_prices.services.quotes import fetch_price
from wsb_prices.services.yahoo_api import new_client


logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[,\s]+")


def normalize_symbols(raw: str) -> List[str]:
    """Split on commas/whitespace, uppercase, drop empties and repeats (first wins)."""
    seen: List[str] = []
    for part in _SEPARATORS.split(raw or ""):
        sym = part.strip().upper()
        if sym and sym not in seen:
            seen.append(sym)
    return seen


async def fetch_prices(symbols: List[str], source: str) -> AggregateResult:
    # One shared client sized to the batch so no fetch waits on the pool;
    # every fetch settles before we partition
    async with new_client(max_connections=max(len(symbols), 1)) as client:
        outcomes = await asyncio.gather(
            *(fetch_price(s, source, client=client) for s in symbols),
            return_exceptions=True,
        )

    prices: List[Quote] = []
    errors: List[str] = []
    for symbol, outcome in zip(symbols, outcomes):
        if isinstance(outcome, Quote):
            prices.append(outcome)
        elif isinstance(outcome, BaseException):
            if not isinstance(outcome, Exception):
                raise outcome
            logger.warning("Failed to fetch price for %s: %s", symbol, outcome)
            errors.append(f"{symbol}: {outcome}")

    return AggregateResult(
        success=len(prices) > 0,
        prices=prices,
        errors=errors,
        total_requested=len(symbols),
        total_successful=len(prices),
        total_failed=len(errors),
    )
