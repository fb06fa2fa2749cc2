"""Upstream quote records and the session-resolved quote derived from them."""

import enum
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class MarketState(str, enum.Enum):
    """Trading phase reported by Yahoo in ``marketState``.

    Yahoo also sends PREPRE, POSTPOST and CLOSED; anything that is not one of
    the three live sessions is treated as CLOSED.
    """

    REGULAR = "REGULAR"
    PRE = "PRE"
    POST = "POST"
    CLOSED = "CLOSED"

    @classmethod
    def parse(cls, raw: str) -> "MarketState":
        try:
            return cls(raw)
        except ValueError:
            return cls.CLOSED


class QuoteRecord(BaseModel):
    """One entry of ``quoteResponse.result`` as returned by the v7 quote endpoint.

    Price and change fields are zero when the session has not traded yet.
    Zero is data, not an error marker.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    short_name: str = Field(default="", alias="shortName")
    symbol: str = Field(default="", alias="symbol")
    market_state: str = Field(default="", alias="marketState")
    currency: str = Field(default="", alias="currency")
    exchange_name: str = Field(default="", alias="fullExchangeName")
    exchange_delay: float = Field(default=0.0, alias="exchangeDataDelayedBy")
    regular_market_change: float = Field(default=0.0, alias="regularMarketChange")
    regular_market_change_percent: float = Field(default=0.0, alias="regularMarketChangePercent")
    regular_market_price: float = Field(default=0.0, alias="regularMarketPrice")
    regular_market_previous_close: float = Field(default=0.0, alias="regularMarketPreviousClose")
    regular_market_open: float = Field(default=0.0, alias="regularMarketOpen")
    regular_market_day_range: str = Field(default="", alias="regularMarketDayRange")
    regular_market_day_high: float = Field(default=0.0, alias="regularMarketDayHigh")
    regular_market_day_low: float = Field(default=0.0, alias="regularMarketDayLow")
    regular_market_volume: float = Field(default=0.0, alias="regularMarketVolume")
    post_market_change: float = Field(default=0.0, alias="postMarketChange")
    post_market_change_percent: float = Field(default=0.0, alias="postMarketChangePercent")
    post_market_price: float = Field(default=0.0, alias="postMarketPrice")
    pre_market_change: float = Field(default=0.0, alias="preMarketChange")
    pre_market_change_percent: float = Field(default=0.0, alias="preMarketChangePercent")
    pre_market_price: float = Field(default=0.0, alias="preMarketPrice")
    fifty_two_week_high: float = Field(default=0.0, alias="fiftyTwoWeekHigh")
    fifty_two_week_low: float = Field(default=0.0, alias="fiftyTwoWeekLow")
    quote_type: str = Field(default="", alias="quoteType")
    market_cap: float = Field(default=0.0, alias="marketCap")

    @field_validator("*", mode="before")
    @classmethod
    def _unwrap_yahoo_value(cls, value: Any, info: ValidationInfo) -> Any:
        # null -> zero value; {"raw": 1.0, "fmt": "1.00"} -> raw for numbers, fmt for text
        field = cls.model_fields[info.field_name]
        if value is None:
            return field.default
        if isinstance(value, dict):
            key = "raw" if field.annotation is float else "fmt"
            return value.get(key, field.default)
        return value

    @property
    def session(self) -> MarketState:
        return MarketState.parse(self.market_state)


class QuoteResponseBody(BaseModel):
    result: list[QuoteRecord] | None = None
    error: Any = None


class QuoteResponseEnvelope(BaseModel):
    quote_response: QuoteResponseBody = Field(alias="quoteResponse")


@dataclass(frozen=True)
class Quote:
    """Session-resolved view of a QuoteRecord.

    Raw upstream fields stay available through ``record``.
    """

    record: QuoteRecord
    price: float
    previous_close: float
    open: float
    day_high: float
    day_low: float
    change: float
    change_percent: float
    is_active: bool
    is_regular_trading_session: bool
    is_variable_precision: bool
    currency_converted: str
    name: str
    symbol: str
