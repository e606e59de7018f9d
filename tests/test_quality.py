"""Tests for data quality validation."""

from datetime import datetime, timedelta
from decimal import Decimal

from baranalytics.models.bar import PriceBar
from baranalytics.quality import validate_bars


def _make_bar(ts: datetime, **kwargs) -> PriceBar:
    defaults = dict(
        timestamp=ts, open=Decimal("100"), high=Decimal("101"),
        low=Decimal("99"), close=Decimal("100.5"), volume=10000,
    )
    defaults.update(kwargs)
    return PriceBar(**defaults)


class TestValidateBars:
    def test_empty(self):
        result = validate_bars([])
        assert not result.passed
        assert result.failed_checks[0].name == "not_empty"

    def test_valid(self, sample_bars):
        assert validate_bars(sample_bars).passed

    def test_out_of_order(self):
        base = datetime(2024, 1, 2)
        bars = [_make_bar(base + timedelta(days=1)), _make_bar(base)]
        result = validate_bars(bars)
        order = next(c for c in result.checks if c.name == "timestamp_order")
        assert not order.passed
        assert order.message == "1 out of order"

    def test_high_below_close(self):
        bars = [_make_bar(datetime(2024, 1, 2), close=Decimal("102"))]
        result = validate_bars(bars)
        assert [c.name for c in result.failed_checks] == ["ohlc_consistency"]

    def test_low_above_open(self):
        bars = [_make_bar(datetime(2024, 1, 2), low=Decimal("100.2"))]
        assert not validate_bars(bars).passed

    def test_negative_volume(self):
        bars = [_make_bar(datetime(2024, 1, 2), volume=-5)]
        result = validate_bars(bars)
        vol = next(c for c in result.checks if c.name == "volume_sanity")
        assert not vol.passed
