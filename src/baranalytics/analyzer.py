"""SecurityAnalyzer: config-driven entry point over the analysis passes."""

from __future__ import annotations

import logging
from datetime import date, datetime

import pandas as pd

from baranalytics.classifiers import BaseSwingClassifier, create_classifier
from baranalytics.config import AnalysisConfig
from baranalytics.frames import bars_from_frame, resample_bars
from baranalytics.models.bar import BarSize, TrendQualification
from baranalytics.models.position import Position
from baranalytics.models.security import Security
from baranalytics.patterns import annotate
from baranalytics.portfolio import PositionSummary
from baranalytics.trends import NetChangeByTrendType, aggregate_net_change_by_trend

logger = logging.getLogger(__name__)


class SecurityAnalyzer:
    """Holds one configuration and one classifier for every pass.

    Usage::

        analyzer = SecurityAnalyzer(load_config_from_env())
        security = analyzer.load_security("AAPL", daily_frame)
        analyzer.annotate(security)
        stats = analyzer.net_change_by_trend(security, BarSize.WEEKLY, bar_count=3)
    """

    def __init__(
        self,
        config: AnalysisConfig | None = None,
        classifier: BaseSwingClassifier | None = None,
    ) -> None:
        self.config = config or AnalysisConfig()
        self.classifier = classifier or create_classifier(self.config.classifier)

    # --------------------------------------------------------------- loading

    def load_security(
        self,
        ticker: str,
        daily: pd.DataFrame,
        validate: bool = True,
    ) -> Security:
        """Build a security from daily bars and derive the longer bar sizes."""
        security = Security(ticker)
        bars = bars_from_frame(daily, validate=validate)
        security.set_bars(BarSize.DAILY, bars)
        for size in (BarSize.WEEKLY, BarSize.MONTHLY, BarSize.QUARTERLY):
            security.set_bars(size, resample_bars(bars, size))
        logger.info("Loaded %d daily bars for %s", len(bars), security.ticker)
        return security

    # ---------------------------------------------------------------- passes

    def annotate(self, security: Security) -> None:
        annotate(security, self.config.patterns)

    def classify(self, security: Security, bar_size: BarSize, bar_count: int) -> None:
        self.classifier.classify(security, bar_size, bar_count)

    def net_change_by_trend(
        self,
        security: Security,
        bar_size: BarSize,
        bar_count: int,
        start: date | datetime | None = None,
        end: date | datetime | None = None,
    ) -> dict[TrendQualification, NetChangeByTrendType]:
        return aggregate_net_change_by_trend(
            security, bar_size, bar_count, start, end, classifier=self.classifier,
        )

    def summarize(self, positions: Position | list[Position]) -> PositionSummary:
        return PositionSummary(positions)
