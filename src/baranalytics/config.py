"""Analysis configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class ClassifierType(Enum):
    """Supported swing classifier backends."""

    SWING_POINT = "swing_point"
    MOCK = "mock"


@dataclass(frozen=True)
class HammerThresholds:
    """Named thresholds for the bullish-hammer candlestick rule.

    Attributes:
        wick_to_body: Minimum lower-wick to body ratio.
        upper_wick_limit: Maximum upper wick as a fraction of the body.
    """

    wick_to_body: Decimal = Decimal("2.0")
    upper_wick_limit: Decimal = Decimal("0.25")


@dataclass
class PatternConfig:
    """Pattern rule switches and thresholds.

    Attributes:
        enabled: Per-rule overrides keyed by rule name. Rules not listed
            fall back to their registered default.
        hammer: Thresholds for the bullish-hammer rule.
        atr_period: Number of bars averaged by the average true range floor.
    """

    enabled: dict[str, bool] = field(default_factory=dict)
    hammer: HammerThresholds = field(default_factory=HammerThresholds)
    atr_period: int = 14

    def is_enabled(self, rule_name: str, default: bool = True) -> bool:
        return self.enabled.get(rule_name, default)


@dataclass
class AnalysisConfig:
    """Top-level configuration.

    Attributes:
        classifier: Swing classifier used when none is passed explicitly.
        patterns: Pattern annotation settings.
    """

    classifier: ClassifierType = ClassifierType.SWING_POINT
    patterns: PatternConfig = field(default_factory=PatternConfig)


def load_config_from_env() -> AnalysisConfig:
    """Build an ``AnalysisConfig`` from environment variables.

    Environment variables:
        BARANALYTICS_CLASSIFIER: Classifier backend (default: "swing_point").
        BARANALYTICS_DISABLED_RULES: Comma-separated rule names to disable.
        BARANALYTICS_ATR_PERIOD: Average true range period (default: 14).
    """
    classifier = ClassifierType(os.getenv("BARANALYTICS_CLASSIFIER", "swing_point"))
    disabled = os.getenv("BARANALYTICS_DISABLED_RULES", "")
    enabled = {name.strip(): False for name in disabled.split(",") if name.strip()}

    return AnalysisConfig(
        classifier=classifier,
        patterns=PatternConfig(
            enabled=enabled,
            atr_period=int(os.getenv("BARANALYTICS_ATR_PERIOD", "14")),
        ),
    )
