"""DataFrame interop for bars and trend statistics.

Bars enter the package from DataFrames (the shape the market data store
hands out) and leave it as DataFrames for reporting. Prices are
``Decimal`` inside the package and ``float`` in frames.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

import pandas as pd

from baranalytics.errors import AnalysisError, AnalysisErrorCode
from baranalytics.models.bar import BarSize, PriceBar, TrendQualification
from baranalytics.quality import validate_bars
from baranalytics.trends import NetChangeByTrendType

BAR_COLUMNS = ["timestamp", "open", "high", "low", "close", "volume"]

_PERIOD_FREQ: dict[BarSize, str] = {
    BarSize.WEEKLY: "W",
    BarSize.MONTHLY: "M",
    BarSize.QUARTERLY: "Q",
}


def bars_to_frame(bars: Iterable[PriceBar]) -> pd.DataFrame:
    records = [
        {
            "timestamp": b.timestamp,
            "open": float(b.open),
            "high": float(b.high),
            "low": float(b.low),
            "close": float(b.close),
            "volume": int(b.volume),
        }
        for b in bars
    ]
    if not records:
        return pd.DataFrame(columns=BAR_COLUMNS)
    return pd.DataFrame(records, columns=BAR_COLUMNS)


def bars_from_frame(df: pd.DataFrame, validate: bool = True) -> list[PriceBar]:
    """Build bars from a frame with ``timestamp`` and OHLCV columns.

    Rows are sorted by timestamp. Prices go through ``str`` so the
    ``Decimal`` values match what was printed, not the binary float.

    Raises:
        AnalysisError: ``VALIDATION_FAILED`` when columns are missing or,
            with ``validate``, when a quality check fails.
    """
    missing = [c for c in BAR_COLUMNS if c not in df.columns]
    if missing:
        raise AnalysisError(
            f"Missing bar columns: {', '.join(missing)}",
            code=AnalysisErrorCode.VALIDATION_FAILED,
        )

    df = df.assign(timestamp=pd.to_datetime(df["timestamp"])).sort_values("timestamp")
    bars = [
        PriceBar(
            timestamp=row.timestamp.to_pydatetime(),
            open=Decimal(str(row.open)),
            high=Decimal(str(row.high)),
            low=Decimal(str(row.low)),
            close=Decimal(str(row.close)),
            volume=int(row.volume),
        )
        for row in df.itertuples(index=False)
    ]

    if validate:
        result = validate_bars(bars)
        if not result.passed:
            msgs = "; ".join(c.message for c in result.failed_checks)
            raise AnalysisError(
                f"Validation failed: {msgs}",
                code=AnalysisErrorCode.VALIDATION_FAILED,
            )
    return bars


def resample_bars(daily: Iterable[PriceBar], bar_size: BarSize) -> list[PriceBar]:
    """Roll daily bars up into weekly, monthly or quarterly bars.

    Each period bar takes the timestamp and open of its first daily bar,
    the close of its last, the extreme high and low, and the summed
    volume.
    """
    daily = list(daily)
    if bar_size is BarSize.DAILY:
        return daily
    if not daily:
        return []

    stamps = pd.to_datetime(pd.Series([b.timestamp for b in daily]))
    if stamps.dt.tz is not None:
        stamps = stamps.dt.tz_localize(None)
    periods = stamps.dt.to_period(_PERIOD_FREQ[bar_size])

    out: list[PriceBar] = []
    for _, positions in sorted(periods.groupby(periods).indices.items()):
        group = [daily[i] for i in positions]
        out.append(PriceBar(
            timestamp=group[0].timestamp,
            open=group[0].open,
            high=max(b.high for b in group),
            low=min(b.low for b in group),
            close=group[-1].close,
            volume=sum(b.volume for b in group),
        ))
    return out


def net_change_frame(result: dict[TrendQualification, NetChangeByTrendType]) -> pd.DataFrame:
    """One row per trend type: occurrences and average change."""
    return pd.DataFrame(
        [
            {
                "trend_type": record.trend_type.value,
                "occurrences": record.occurrences,
                "average_change": float(record.average_change),
            }
            for record in result.values()
        ],
        columns=["trend_type", "occurrences", "average_change"],
    )
