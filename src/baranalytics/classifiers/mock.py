"""Mock classifier for tests: labels are preloaded, not derived."""

from __future__ import annotations

from baranalytics.classifiers.base import BaseSwingClassifier
from baranalytics.models.bar import BarSize, TrendQualification
from baranalytics.models.security import Security
from baranalytics.models.sequence import BarSequence


class MockClassifier(BaseSwingClassifier):
    """Hands out preset labels in bar order.

    Use ``set_labels`` to preload labels for a (ticker, bar size,
    bar_count). Bars beyond the preset list, or sequences with no preset,
    are labelled ``NOT_SET``.
    """

    def __init__(self) -> None:
        self._labels: dict[tuple[str, BarSize, int], list[TrendQualification]] = {}
        self.calls = 0

    def set_labels(
        self,
        ticker: str,
        bar_size: BarSize,
        bar_count: int,
        labels: list[TrendQualification],
    ) -> None:
        self._labels[(ticker.upper(), bar_size, bar_count)] = list(labels)

    def compute(
        self,
        security: Security,
        bars: BarSequence,
        bar_size: BarSize,
        bar_count: int,
    ) -> list[TrendQualification]:
        self.calls += 1
        preset = self._labels.get((security.ticker, bar_size, bar_count), [])
        padding = [TrendQualification.NOT_SET] * max(0, len(bars) - len(preset))
        return preset[:len(bars)] + padding
