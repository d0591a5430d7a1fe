import time
from typing import Any, Optional


def round_price(value: float) -> float:
    return round(float(value), 2)


def round_or_none(value: Any) -> Optional[float]:
    """Round a numeric upstream field; falsy or non-numeric values become None."""
    if not value or isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return round_price(value)


def epoch_now() -> int:
    return int(time.time())
