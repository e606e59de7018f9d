"""Tests for configuration and env loading."""

from decimal import Decimal

import pytest

from baranalytics.config import (
    AnalysisConfig,
    ClassifierType,
    PatternConfig,
    load_config_from_env,
)


class TestDefaults:
    def test_analysis_config(self):
        config = AnalysisConfig()
        assert config.classifier is ClassifierType.SWING_POINT
        assert config.patterns.atr_period == 14
        assert config.patterns.hammer.wick_to_body == Decimal("2.0")
        assert config.patterns.hammer.upper_wick_limit == Decimal("0.25")

    def test_rule_enabled_fallback(self):
        config = PatternConfig(enabled={"volume": False})
        assert not config.is_enabled("volume")
        assert config.is_enabled("bullish_hammer")
        assert not config.is_enabled("unknown", default=False)


class TestLoadFromEnv:
    def test_empty_env(self, monkeypatch):
        for var in ("BARANALYTICS_CLASSIFIER", "BARANALYTICS_DISABLED_RULES", "BARANALYTICS_ATR_PERIOD"):
            monkeypatch.delenv(var, raising=False)
        config = load_config_from_env()
        assert config.classifier is ClassifierType.SWING_POINT
        assert config.patterns.enabled == {}

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("BARANALYTICS_CLASSIFIER", "mock")
        monkeypatch.setenv("BARANALYTICS_DISABLED_RULES", "volume, bullish_hammer,")
        monkeypatch.setenv("BARANALYTICS_ATR_PERIOD", "10")
        config = load_config_from_env()
        assert config.classifier is ClassifierType.MOCK
        assert config.patterns.enabled == {"volume": False, "bullish_hammer": False}
        assert config.patterns.atr_period == 10

    def test_unknown_classifier(self, monkeypatch):
        monkeypatch.setenv("BARANALYTICS_CLASSIFIER", "nope")
        with pytest.raises(ValueError):
            load_config_from_env()
