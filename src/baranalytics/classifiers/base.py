"""Abstract base class for swing classifiers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from baranalytics.errors import AnalysisError, AnalysisErrorCode
from baranalytics.models.bar import BarSize, TrendQualification
from baranalytics.models.security import Security
from baranalytics.models.sequence import BarSequence


class BaseSwingClassifier(ABC):
    """Assigns a ``TrendQualification`` to every bar of a sequence.

    Classification is cached on the bars keyed by ``bar_count``. Bars
    that already carry a label for the requested ``bar_count`` are left
    untouched, so classifying twice with the same lookback never changes
    earlier results.
    """

    def classify(
        self,
        security: Security,
        bar_size: BarSize,
        bar_count: int,
    ) -> None:
        """Ensure every bar in the sequence is classified for ``bar_count``.

        Args:
            security: Security whose bars are classified.
            bar_size: Which of the security's sequences to classify.
            bar_count: Lookback window in bars.

        Raises:
            AnalysisError: ``VALIDATION_FAILED`` when ``bar_count`` is below 1.
        """
        if bar_count < 1:
            raise AnalysisError(
                f"bar_count must be positive, got {bar_count}",
                code=AnalysisErrorCode.VALIDATION_FAILED,
            )

        bars = security.get_bars(bar_size)
        if all(bar.is_classified(bar_count) for bar in bars):
            return

        labels = self.compute(security, bars, bar_size, bar_count)
        for bar, label in zip(bars, labels):
            if not bar.is_classified(bar_count):
                bar.set_trend(bar_count, label)

    @abstractmethod
    def compute(
        self,
        security: Security,
        bars: BarSequence,
        bar_size: BarSize,
        bar_count: int,
    ) -> list[TrendQualification]:
        """Return one label per bar of ``bars``, oldest first."""
        ...
