"""baranalytics: trend segmentation, bar pattern flags and position returns.

Quick start::

    from baranalytics import SecurityAnalyzer, BarSize
    analyzer = SecurityAnalyzer()
    security = analyzer.load_security("AAPL", daily_frame)
    analyzer.annotate(security)
    stats = analyzer.net_change_by_trend(security, BarSize.DAILY, bar_count=3)
"""

from __future__ import annotations

from baranalytics.analyzer import SecurityAnalyzer
from baranalytics.classifiers import BaseSwingClassifier, create_classifier
from baranalytics.classifiers.mock import MockClassifier
from baranalytics.classifiers.swing import SwingPointClassifier
from baranalytics.config import (
    AnalysisConfig,
    ClassifierType,
    HammerThresholds,
    PatternConfig,
    load_config_from_env,
)
from baranalytics.errors import AnalysisError, AnalysisErrorCode
from baranalytics.frames import bars_from_frame, bars_to_frame, net_change_frame, resample_bars
from baranalytics.models import (
    BarSequence,
    BarSize,
    CandlestickPattern,
    Position,
    PriceBar,
    Security,
    TechnicalSignal,
    Trade,
    TrendQualification,
)
from baranalytics.patterns import (
    PATTERN_RULES,
    annotate,
    average_true_range,
    flagged_bars,
    set_candlestick_patterns,
    set_technicals,
)
from baranalytics.portfolio import PositionSummary
from baranalytics.quality import validate_bars
from baranalytics.trends import NetChangeByTrendType, aggregate_net_change_by_trend

__version__ = "0.1.0"

__all__ = [
    # Entry point
    "SecurityAnalyzer",
    # Config
    "AnalysisConfig",
    "ClassifierType",
    "HammerThresholds",
    "PatternConfig",
    "load_config_from_env",
    # Errors
    "AnalysisError",
    "AnalysisErrorCode",
    # Models
    "BarSequence",
    "BarSize",
    "CandlestickPattern",
    "Position",
    "PriceBar",
    "Security",
    "TechnicalSignal",
    "Trade",
    "TrendQualification",
    # Classifiers
    "BaseSwingClassifier",
    "MockClassifier",
    "SwingPointClassifier",
    "create_classifier",
    # Trends
    "NetChangeByTrendType",
    "aggregate_net_change_by_trend",
    # Patterns
    "PATTERN_RULES",
    "annotate",
    "average_true_range",
    "flagged_bars",
    "set_candlestick_patterns",
    "set_technicals",
    # Portfolio
    "PositionSummary",
    # Frames and quality
    "bars_from_frame",
    "bars_to_frame",
    "net_change_frame",
    "resample_bars",
    "validate_bars",
]
