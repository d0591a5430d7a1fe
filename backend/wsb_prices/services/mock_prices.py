import random
from typing import Dict, Optional

from wsb_prices.schemas import Quote
from wsb_prices.settings import settings
from wsb_prices.utils.helpers import epoch_now, round_price


BASE_PRICES: Dict[str, float] = {
    "AAPL": 150.0,
    "TSLA": 200.0,
    "MSFT": 300.0,
    "GOOGL": 2500.0,
    "AMZN": 3000.0,
    "NVDA": 400.0,
    "META": 250.0,
    "NFLX": 400.0,
    "JPM": 150.0,
    "BAC": 30.0,
    "WFC": 40.0,
    "GS": 350.0,
}

PRICE_VARIATION = 0.05
MAX_CHANGE_24H = 5.0


def base_price(symbol: str) -> float:
    return BASE_PRICES.get(symbol, 100.0 + len(symbol) * 10)


class MockPriceGenerator:
    """Synthetic quotes around a per-symbol base price.

    Price moves at most PRICE_VARIATION either side of the base; the 24h change
    is drawn independently, up to MAX_CHANGE_24H in currency units.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def quote(self, symbol: str) -> Quote:
        variation = self._rng.uniform(-PRICE_VARIATION, PRICE_VARIATION)
        price = base_price(symbol) * (1 + variation)
        change_24h = self._rng.uniform(-MAX_CHANGE_24H, MAX_CHANGE_24H)
        return Quote(
            symbol=symbol,
            price=round_price(price),
            currency="USD",
            timestamp=epoch_now(),
            source="mock",
            change_24h=round_price(change_24h),
            change_percent_24h=round_price(change_24h / price * 100),
        )


_generator = MockPriceGenerator(settings.MOCK_SEED)


async def fetch_mock_price(symbol: str) -> Quote:
    return _generator.quote(symbol)
