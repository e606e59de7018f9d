"""Ordered, index-addressable bar sequence."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from datetime import date, datetime
from typing import Iterable, Iterator

from baranalytics.errors import AnalysisError, AnalysisErrorCode
from baranalytics.models.bar import PriceBar


class BarSequence:
    """Bars for one (security, bar size) pair, oldest first.

    The sequence owns its bars. Neighbours are reached through indexes,
    so ``next_bar``/``prior_bar`` are O(1) without bars pointing at each
    other. Bars can only be appended in strictly increasing timestamp
    order.
    """

    def __init__(self, bars: Iterable[PriceBar] = ()) -> None:
        self._bars: list[PriceBar] = []
        self._dates: list[date] = []
        for bar in bars:
            self.append(bar)

    def append(self, bar: PriceBar) -> None:
        if self._bars and bar.timestamp <= self._bars[-1].timestamp:
            raise AnalysisError(
                f"Bar at {bar.timestamp} is not after {self._bars[-1].timestamp}",
                code=AnalysisErrorCode.VALIDATION_FAILED,
            )
        self._bars.append(bar)
        self._dates.append(_as_date(bar.timestamp))

    def __len__(self) -> int:
        return len(self._bars)

    def __iter__(self) -> Iterator[PriceBar]:
        return iter(self._bars)

    def __getitem__(self, index: int) -> PriceBar:
        return self._bars[index]

    @property
    def first(self) -> PriceBar | None:
        return self._bars[0] if self._bars else None

    @property
    def last(self) -> PriceBar | None:
        return self._bars[-1] if self._bars else None

    # --- Navigation ---

    def next_bar(self, index: int) -> PriceBar | None:
        if index + 1 < len(self._bars):
            return self._bars[index + 1]
        return None

    def prior_bar(self, index: int) -> PriceBar | None:
        if index > 0:
            return self._bars[index - 1]
        return None

    def prior_bars(self, index: int, count: int) -> list[PriceBar]:
        """Up to ``count`` bars immediately before ``index``, oldest first."""
        return self._bars[max(0, index - count):index]

    def index_of(self, when: date | datetime) -> int:
        """Index of the bar dated ``when``, or of the first bar after it.

        Raises:
            AnalysisError: No bar on or after ``when``.
        """
        i = bisect_left(self._dates, _as_date(when))
        if i == len(self._bars):
            raise AnalysisError(
                f"No bar on or after {when}",
                code=AnalysisErrorCode.NOT_FOUND,
            )
        return i

    def index_at_or_before(self, when: date | datetime) -> int:
        """Index of the last bar dated on or before ``when``."""
        i = bisect_right(self._dates, _as_date(when))
        if i == 0:
            raise AnalysisError(
                f"No bar on or before {when}",
                code=AnalysisErrorCode.NOT_FOUND,
            )
        return i - 1


def _as_date(when: date | datetime) -> date:
    return when.date() if isinstance(when, datetime) else when
