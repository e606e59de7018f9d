"""Per-bar candlestick and technical pattern annotation.

Rules live in a static table, ``PATTERN_RULES``. Each rule is a pure
function of a bar sequence, an index into it and the pattern settings,
and returns the flags it decided for that bar. The engine clears the
flags a rule owns before writing its result, so annotating twice gives
the same flags as annotating once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Callable, Union

from baranalytics.config import PatternConfig
from baranalytics.models.bar import BarSize, CandlestickPattern, PriceBar, TechnicalSignal
from baranalytics.models.security import Security
from baranalytics.models.sequence import BarSequence

logger = logging.getLogger(__name__)

Flag = Union[CandlestickPattern, TechnicalSignal]
RuleFunc = Callable[[BarSequence, int, PatternConfig], dict[Flag, bool]]


class RuleFamily(Enum):
    CANDLESTICK = "candlestick"
    TECHNICAL = "technical"


@dataclass(frozen=True)
class PatternRule:
    """Registry entry.

    Attributes:
        name: Key used to enable or disable the rule in ``PatternConfig``.
        family: Candlestick or technical.
        func: Rule implementation.
        flags: Flags the rule owns; cleared before each application.
        default_enabled: Whether the rule runs when config is silent.
    """

    name: str
    family: RuleFamily
    func: RuleFunc
    flags: tuple[Flag, ...]
    default_enabled: bool = True


# ---- Indicators ----

def true_range(bars: BarSequence, index: int) -> Decimal:
    bar = bars[index]
    prior = bars.prior_bar(index)
    if prior is None:
        return bar.high - bar.low
    return max(
        bar.high - bar.low,
        abs(bar.high - prior.close),
        abs(bar.low - prior.close),
    )


def average_true_range(bars: BarSequence, index: int, period: int = 14) -> Decimal:
    """Simple average of the true range over the bar and its predecessors."""
    window = range(max(0, index - period + 1), index + 1)
    total = sum((true_range(bars, i) for i in window), Decimal("0"))
    return total / len(window)


# ---- Candlestick rules ----

def bullish_hammer(bars: BarSequence, index: int, config: PatternConfig) -> dict[Flag, bool]:
    """Long lower wick at the bottom of a short decline, closing near the high."""
    flag = CandlestickPattern.BULLISH_HAMMER
    bar = bars[index]
    thresholds = config.hammer

    prior = bars.prior_bars(index, 3)
    if len(prior) < 3:
        return {flag: False}

    body_low = min(bar.open, bar.close)
    if min(p.low for p in prior) <= body_low:
        return {flag: False}

    lower_wick = body_low - bar.low
    upper_wick = bar.high - max(bar.open, bar.close)
    body = abs(bar.change)

    if lower_wick < 0:
        return {flag: False}
    # A zero body skips the ratio test
    if body > 0 and lower_wick / body < thresholds.wick_to_body:
        return {flag: False}
    if lower_wick < average_true_range(bars, index, config.atr_period):
        return {flag: False}
    if upper_wick > body * thresholds.upper_wick_limit:
        return {flag: False}
    return {flag: True}


# ---- Technical rules ----

def volume_direction(bars: BarSequence, index: int, config: PatternConfig) -> dict[Flag, bool]:
    """Rising or falling volume against the prior bar; nothing on a tie."""
    prior = bars.prior_bar(index)
    if prior is None:
        return {}
    volume = bars[index].volume
    if volume > prior.volume:
        return {TechnicalSignal.RISING_VOLUME: True}
    if volume < prior.volume:
        return {TechnicalSignal.FALLING_VOLUME: True}
    return {}


PATTERN_RULES: dict[str, PatternRule] = {
    rule.name: rule
    for rule in (
        PatternRule(
            name="bullish_hammer",
            family=RuleFamily.CANDLESTICK,
            func=bullish_hammer,
            flags=(CandlestickPattern.BULLISH_HAMMER,),
        ),
        PatternRule(
            name="volume",
            family=RuleFamily.TECHNICAL,
            func=volume_direction,
            flags=(TechnicalSignal.RISING_VOLUME, TechnicalSignal.FALLING_VOLUME),
        ),
    )
}


# ---- Engine ----

def _write_flag(bar: PriceBar, flag: Flag, value: bool) -> None:
    if isinstance(flag, CandlestickPattern):
        bar.set_candlestick_flag(flag, value)
    else:
        bar.set_technical_flag(flag, value)


def _clear_flag(bar: PriceBar, flag: Flag) -> None:
    if isinstance(flag, CandlestickPattern):
        bar.candlesticks.pop(flag, None)
    else:
        bar.technicals.pop(flag, None)


def apply_rule(rule: PatternRule, bars: BarSequence, config: PatternConfig) -> int:
    """Run one rule over every bar; returns how many flags were set true."""
    hits = 0
    for index, bar in enumerate(bars):
        for flag in rule.flags:
            _clear_flag(bar, flag)
        for flag, value in rule.func(bars, index, config).items():
            _write_flag(bar, flag, value)
            if value:
                hits += 1
    return hits


def _annotate_family(
    security: Security,
    family: RuleFamily | None,
    config: PatternConfig | None,
) -> None:
    config = config or PatternConfig()
    bars = security.get_bars(BarSize.DAILY)
    for rule in PATTERN_RULES.values():
        if family is not None and rule.family is not family:
            continue
        if not config.is_enabled(rule.name, rule.default_enabled):
            continue
        hits = apply_rule(rule, bars, config)
        logger.debug("%s: rule %s flagged %d of %d bars", security.ticker, rule.name, hits, len(bars))


def set_candlestick_patterns(security: Security, config: PatternConfig | None = None) -> None:
    """Apply every enabled candlestick rule to the security's daily bars."""
    _annotate_family(security, RuleFamily.CANDLESTICK, config)


def set_technicals(security: Security, config: PatternConfig | None = None) -> None:
    """Apply every enabled technical rule to the security's daily bars."""
    _annotate_family(security, RuleFamily.TECHNICAL, config)


def annotate(security: Security, config: PatternConfig | None = None) -> None:
    """Apply every enabled rule of both families to the daily bars."""
    _annotate_family(security, None, config)


def flagged_bars(security: Security, flag: Flag) -> list[PriceBar]:
    """Daily bars currently carrying ``flag`` set to true."""
    bars = security.get_bars(BarSize.DAILY)
    if isinstance(flag, CandlestickPattern):
        return [bar for bar in bars if bar.has_candlestick(flag)]
    return [bar for bar in bars if bar.has_technical(flag)]
