"""Analysis data models."""

from baranalytics.models.bar import (
    BarSize,
    CandlestickPattern,
    PriceBar,
    TechnicalSignal,
    TrendQualification,
)
from baranalytics.models.sequence import BarSequence
from baranalytics.models.security import Security
from baranalytics.models.position import Position, Trade

__all__ = [
    "BarSize",
    "BarSequence",
    "CandlestickPattern",
    "PriceBar",
    "Position",
    "Security",
    "TechnicalSignal",
    "Trade",
    "TrendQualification",
]
