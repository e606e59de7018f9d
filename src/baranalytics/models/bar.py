"""Price bar data model and the enumerations attached to it."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum


class BarSize(Enum):
    """Bar granularity."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"


class TrendQualification(Enum):
    """Trend label assigned to a bar by a swing classifier.

    Declaration order is the order of aggregated results.
    """

    NOT_SET = "not_set"
    UPTREND = "uptrend"
    DOWNTREND = "downtrend"
    SIDEWAYS = "sideways"


class CandlestickPattern(Enum):
    BULLISH_HAMMER = "bullish_hammer"


class TechnicalSignal(Enum):
    RISING_VOLUME = "rising_volume"
    FALLING_VOLUME = "falling_volume"


@dataclass(frozen=True, eq=False)
class PriceBar:
    """Single OHLCV bar plus its annotation caches.

    OHLCV values are frozen once the bar is built. The flag dictionaries
    and the trend cache are written by the annotation and classification
    passes.

    Attributes:
        timestamp: Bar timestamp (start of period).
        open: Opening price.
        high: High price.
        low: Low price.
        close: Closing price.
        volume: Traded volume.
        candlesticks: Candlestick flags keyed by pattern.
        technicals: Technical flags keyed by signal.
        trends: Trend classification keyed by classifier lookback.
    """

    timestamp: datetime
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: int
    candlesticks: dict[CandlestickPattern, bool] = field(
        default_factory=dict, init=False, repr=False,
    )
    technicals: dict[TechnicalSignal, bool] = field(
        default_factory=dict, init=False, repr=False,
    )
    trends: dict[int, TrendQualification] = field(
        default_factory=dict, init=False, repr=False,
    )

    @property
    def change(self) -> Decimal:
        return self.close - self.open

    # --- Flags ---

    def set_candlestick_flag(self, pattern: CandlestickPattern, value: bool) -> None:
        self.candlesticks[pattern] = value

    def has_candlestick(self, pattern: CandlestickPattern) -> bool:
        return self.candlesticks.get(pattern, False)

    def set_technical_flag(self, signal: TechnicalSignal, value: bool) -> None:
        self.technicals[signal] = value

    def has_technical(self, signal: TechnicalSignal) -> bool:
        return self.technicals.get(signal, False)

    # --- Trend cache ---

    def set_trend(self, bar_count: int, trend: TrendQualification) -> None:
        self.trends[bar_count] = trend

    def get_trend(self, bar_count: int) -> TrendQualification:
        """Trend for ``bar_count``; ``NOT_SET`` when never classified."""
        return self.trends.get(bar_count, TrendQualification.NOT_SET)

    def is_classified(self, bar_count: int) -> bool:
        return bar_count in self.trends
