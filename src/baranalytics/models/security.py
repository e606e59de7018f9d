"""Security: a ticker with one bar sequence per bar size."""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable

from baranalytics.errors import AnalysisError, AnalysisErrorCode
from baranalytics.models.bar import BarSize, PriceBar
from baranalytics.models.sequence import BarSequence


class Security:
    """Traded instrument identified by its ticker.

    Two ``Security`` objects with the same (case-insensitive) ticker are
    the same security.
    """

    def __init__(self, ticker: str, name: str | None = None) -> None:
        self.ticker = ticker.upper()
        self.name = name or self.ticker
        self._bars: dict[BarSize, BarSequence] = {size: BarSequence() for size in BarSize}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Security):
            return NotImplemented
        return self.ticker == other.ticker

    def __hash__(self) -> int:
        return hash(self.ticker)

    def __repr__(self) -> str:
        return f"Security({self.ticker!r})"

    # --- Bars ---

    def get_bars(self, bar_size: BarSize = BarSize.DAILY) -> BarSequence:
        return self._bars[bar_size]

    def set_bars(self, bar_size: BarSize, bars: Iterable[PriceBar]) -> None:
        """Replace the sequence for ``bar_size``."""
        self._bars[bar_size] = BarSequence(bars)

    def get_first_bar(self, bar_size: BarSize = BarSize.DAILY) -> PriceBar:
        return self._require(bar_size).first  # type: ignore[return-value]

    def get_last_bar(self, bar_size: BarSize = BarSize.DAILY) -> PriceBar:
        return self._require(bar_size).last  # type: ignore[return-value]

    def get_bar(self, when: date | datetime, bar_size: BarSize = BarSize.DAILY) -> PriceBar:
        """Bar dated ``when`` or the first one after it."""
        bars = self._require(bar_size)
        return bars[bars.index_of(when)]

    def _require(self, bar_size: BarSize) -> BarSequence:
        bars = self._bars[bar_size]
        if not len(bars):
            raise AnalysisError(
                f"No {bar_size.value} bars for {self.ticker}",
                code=AnalysisErrorCode.NOT_FOUND,
            )
        return bars
