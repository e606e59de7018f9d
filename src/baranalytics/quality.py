"""Data quality checks for price bars."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from baranalytics.models.bar import PriceBar


@dataclass
class ValidationCheck:
    """Single validation check result."""

    name: str
    passed: bool
    message: str = ""


@dataclass
class ValidationResult:
    """Aggregate validation result."""

    checks: list[ValidationCheck] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(c.passed for c in self.checks)

    @property
    def failed_checks(self) -> list[ValidationCheck]:
        return [c for c in self.checks if not c.passed]


def validate_bars(bars: Iterable[PriceBar]) -> ValidationResult:
    """Run all quality checks on a list of bars.

    Checks:
        1. Not empty
        2. Timestamp ordering (strictly increasing)
        3. OHLC consistency (high >= open/close >= low)
        4. Volume sanity (non-negative)
    """
    bars = list(bars)
    result = ValidationResult()

    if not bars:
        result.checks.append(ValidationCheck("not_empty", False, "No bars provided"))
        return result
    result.checks.append(ValidationCheck("not_empty", True, f"{len(bars)} bars"))

    out_of_order = sum(
        1 for prev, cur in zip(bars, bars[1:]) if cur.timestamp <= prev.timestamp
    )
    result.checks.append(ValidationCheck(
        "timestamp_order",
        not out_of_order,
        f"{out_of_order} out of order" if out_of_order else "",
    ))

    inconsistent = sum(
        1 for b in bars
        if b.high < max(b.open, b.close) or b.low > min(b.open, b.close)
    )
    result.checks.append(ValidationCheck(
        "ohlc_consistency",
        not inconsistent,
        f"{inconsistent} bars with H<max(O,C) or L>min(O,C)" if inconsistent else "",
    ))

    neg_vol = sum(1 for b in bars if b.volume < 0)
    result.checks.append(ValidationCheck(
        "volume_sanity",
        not neg_vol,
        f"{neg_vol} bars with negative volume" if neg_vol else "",
    ))

    return result
