from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional


QuoteSource = Literal["yahoo", "mock"]


class Quote(BaseModel):
    model_config = ConfigDict(frozen=True)

    symbol: str
    price: float
    currency: str = "USD"
    timestamp: int
    source: QuoteSource
    change_24h: Optional[float] = None
    change_percent_24h: Optional[float] = None


class StockGroup(BaseModel):
    name: str
    symbols: List[str]
    description: str


class AggregateResult(BaseModel):
    success: bool
    prices: List[Quote] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)
    total_requested: int
    total_successful: int
    total_failed: int


class HealthResponse(BaseModel):
    status: Literal["healthy"]
    service: str
    timestamp: str


class ErrorResponse(BaseModel):
    error: str
    message: str
