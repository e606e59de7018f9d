"""Swing-point trend classifier.

A bar is a swing high when its high is strictly above the highs of the
``bar_count`` bars on each side of it; swing lows mirror this on the
lows. A swing only becomes known ``bar_count`` bars after it forms, so a
bar's trend is judged from the swings confirmed up to that bar:

- higher high and higher low: uptrend
- lower high and lower low: downtrend
- anything else once two highs and two lows exist: sideways
- fewer confirmed swings: not set
"""

from __future__ import annotations

import logging
from decimal import Decimal

from baranalytics.classifiers.base import BaseSwingClassifier
from baranalytics.models.bar import BarSize, TrendQualification
from baranalytics.models.security import Security
from baranalytics.models.sequence import BarSequence

logger = logging.getLogger(__name__)


class SwingPointClassifier(BaseSwingClassifier):
    """Classifies trends from confirmed swing highs and lows."""

    def compute(
        self,
        security: Security,
        bars: BarSequence,
        bar_size: BarSize,
        bar_count: int,
    ) -> list[TrendQualification]:
        highs = [bar.high for bar in bars]
        lows = [bar.low for bar in bars]
        swing_highs: list[Decimal] = []
        swing_lows: list[Decimal] = []
        labels: list[TrendQualification] = []

        for i in range(len(bars)):
            pivot = i - bar_count
            if pivot - bar_count >= 0:
                if _is_extreme(highs, pivot, bar_count, higher=True):
                    swing_highs.append(highs[pivot])
                if _is_extreme(lows, pivot, bar_count, higher=False):
                    swing_lows.append(lows[pivot])
            labels.append(_qualify(swing_highs, swing_lows))

        logger.debug(
            "Classified %d %s bars of %s (bar_count=%d): %d swing highs, %d swing lows",
            len(labels), bar_size.value, security.ticker, bar_count,
            len(swing_highs), len(swing_lows),
        )
        return labels


def _is_extreme(values: list[Decimal], pivot: int, width: int, higher: bool) -> bool:
    neighbours = values[pivot - width:pivot] + values[pivot + 1:pivot + width + 1]
    if higher:
        return all(values[pivot] > v for v in neighbours)
    return all(values[pivot] < v for v in neighbours)


def _qualify(swing_highs: list[Decimal], swing_lows: list[Decimal]) -> TrendQualification:
    if len(swing_highs) < 2 or len(swing_lows) < 2:
        return TrendQualification.NOT_SET
    high_delta = swing_highs[-1] - swing_highs[-2]
    low_delta = swing_lows[-1] - swing_lows[-2]
    if high_delta > 0 and low_delta > 0:
        return TrendQualification.UPTREND
    if high_delta < 0 and low_delta < 0:
        return TrendQualification.DOWNTREND
    return TrendQualification.SIDEWAYS
