"""Trend segmentation and net-change aggregation.

Walks a bar sequence, cuts it into trend segments wherever the swing
classification changes, and keeps a running average of each segment's
percentage move per trend type.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from baranalytics.calendar import snap_to_bar_size
from baranalytics.classifiers import BaseSwingClassifier, create_classifier
from baranalytics.config import AnalysisConfig
from baranalytics.errors import AnalysisError, AnalysisErrorCode
from baranalytics.models.bar import BarSize, PriceBar, TrendQualification
from baranalytics.models.security import Security

logger = logging.getLogger(__name__)


@dataclass
class NetChangeByTrendType:
    """Running average percentage change for one trend type.

    Attributes:
        trend_type: Trend this record aggregates.
        occurrences: Number of segments folded into the average.
        average_change: Mean of (last close - first open) / first open.
    """

    trend_type: TrendQualification
    occurrences: int = 0
    average_change: Decimal = Decimal("0")

    def add_values(self, first_bar: PriceBar, last_bar: PriceBar) -> bool:
        """Fold one segment into the running average.

        Segments opening at exactly zero are dropped without being
        counted. Returns whether the segment was recorded.
        """
        if first_bar.open == 0:
            return False

        change = (last_bar.close - first_bar.open) / first_bar.open
        self.average_change = (
            (self.average_change * self.occurrences + change) / (self.occurrences + 1)
        )
        self.occurrences += 1
        return True


def resolve_range(
    security: Security,
    bar_size: BarSize,
    start: date | datetime | None = None,
    end: date | datetime | None = None,
) -> tuple[date, date]:
    """Resolve the query window, snapped to the ``bar_size`` period.

    Without ``start`` the whole sequence is used. ``start`` without
    ``end`` is rejected.
    """
    if start is None:
        start = security.get_first_bar(bar_size).timestamp
        end = security.get_last_bar(bar_size).timestamp
    elif end is None:
        raise AnalysisError(
            "Invalid input dates: start given without end",
            code=AnalysisErrorCode.INVALID_RANGE,
        )
    return snap_to_bar_size(start, bar_size), snap_to_bar_size(end, bar_size)


def aggregate_net_change_by_trend(
    security: Security,
    bar_size: BarSize,
    bar_count: int,
    start: date | datetime | None = None,
    end: date | datetime | None = None,
    classifier: BaseSwingClassifier | None = None,
    config: AnalysisConfig | None = None,
) -> dict[TrendQualification, NetChangeByTrendType]:
    """Average net percentage change of each trend type's segments.

    The trend already running at ``start`` is skipped, since its true
    start lies before the window. A segment is closed by the bar on which
    a different classification is first observed; that bar is the
    segment's last bar and its successor opens the next segment. The
    segment still open when the sequence runs out is never recorded.
    ``end`` is validated and snapped but the walk always runs to the end
    of the sequence.

    Args:
        security: Security to analyse.
        bar_size: Which bar sequence to walk.
        bar_count: Lookback window forwarded to the classifier.
        start: First bar date; defaults to the first bar.
        end: Required whenever ``start`` is given.
        classifier: Classifier to use; defaults to the configured one.
        config: Source of the default classifier.

    Returns:
        One record per trend type except ``NOT_SET``, in declaration
        order, or an empty dict when the sequence holds no bars.

    Raises:
        AnalysisError: ``INVALID_RANGE`` when ``start`` comes without
            ``end``; ``NOT_FOUND`` when no bar lies on or after ``start``.
    """
    if start is not None and end is None:
        raise AnalysisError(
            "Invalid input dates: start given without end",
            code=AnalysisErrorCode.INVALID_RANGE,
        )

    bars = security.get_bars(bar_size)
    if not len(bars):
        return {}

    start_date, _ = resolve_range(security, bar_size, start, end)

    result = {
        trend: NetChangeByTrendType(trend)
        for trend in TrendQualification
        if trend is not TrendQualification.NOT_SET
    }

    if classifier is None:
        classifier = create_classifier((config or AnalysisConfig()).classifier)
    classifier.classify(security, bar_size, bar_count)

    index = bars.index_of(start_date)
    current_trend = bars[index].get_trend(bar_count)

    # Lead-in: the trend in force at the window start is not attributable
    while index < len(bars) and bars[index].get_trend(bar_count) == current_trend:
        index += 1

    first_bar: PriceBar | None = None
    skipped = 0
    while index < len(bars):
        bar = bars[index]
        trend = bar.get_trend(bar_count)
        if trend != current_trend:
            if first_bar is not None and current_trend in result:
                if not result[current_trend].add_values(first_bar, bar):
                    skipped += 1
            first_bar = bars.next_bar(index)
            current_trend = trend
        index += 1

    if skipped:
        logger.debug(
            "%s: dropped %d segment(s) opening at zero", security.ticker, skipped,
        )
    return result
