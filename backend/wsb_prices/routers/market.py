import logging
from typing import Dict, Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from wsb_prices.schemas import AggregateResult, ErrorResponse, Quote, StockGroup
from wsb_prices.services.aggregation import fetch_prices, normalize_symbols
from wsb_prices.services.catalog import list_groups
from wsb_prices.services.quotes import PriceFetchError, fetch_price
from wsb_prices.settings import settings


logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_SYMBOLS_MESSAGE = (
    "Missing 'symbols' parameter. Use comma or space-separated values like: "
    "?symbols=AAPL,TSLA,MSFT or ?symbols=AAPL TSLA MSFT"
)


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=code, message=message).model_dump(),
    )


@router.get("/groups", response_model=Dict[str, StockGroup])
async def groups() -> Dict[str, StockGroup]:
    return list_groups()


@router.get(
    "/price/{symbol}",
    response_model=Quote,
    responses={400: {"model": ErrorResponse}},
)
async def price(symbol: str, source: Optional[str] = None):
    symbol = symbol.upper()
    source = source or settings.DEFAULT_SOURCE
    logger.info("Fetching price for %s from %s", symbol, source)
    try:
        quote = await fetch_price(symbol, source)
    except PriceFetchError as exc:
        logger.warning("Failed to fetch %s: %s", symbol, exc)
        # 400 even for upstream/timeout failures
        return error_response(
            400, "PRICE_FETCH_FAILED", f"Failed to fetch price for {symbol}: {exc}"
        )
    logger.info("Successfully fetched %s: $%.2f", symbol, quote.price)
    return quote


@router.get(
    "/prices",
    response_model=AggregateResult,
    responses={400: {"model": ErrorResponse}},
)
async def prices(symbols: Optional[str] = None, source: Optional[str] = None):
    if not symbols:
        return error_response(400, "MISSING_SYMBOLS", MISSING_SYMBOLS_MESSAGE)
    source = source or settings.DEFAULT_SOURCE
    symbol_list = normalize_symbols(symbols)
    logger.info("Fetching prices for %d symbols from %s", len(symbol_list), source)
    return await fetch_prices(symbol_list, source)
