"""Return statistics over several positions in one security."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Iterable

from baranalytics.errors import AnalysisError, AnalysisErrorCode
from baranalytics.models.bar import BarSize
from baranalytics.models.position import Position
from baranalytics.models.security import Security


class PositionSummary:
    """Aggregate of positions sharing one security.

    All figures are evaluated as of the timestamp of the security's most
    recent daily bar. ``days_held`` adds up each position's holding
    period, so overlapping positions count their overlap more than once.

    Usage::

        summary = PositionSummary([first_lot, second_lot])
        summary.annualized_net_return_percent
    """

    def __init__(self, positions: Position | Iterable[Position]) -> None:
        if isinstance(positions, Position):
            positions = [positions]
        positions = list(positions)
        if not positions:
            raise AnalysisError(
                "PositionSummary needs at least one position",
                code=AnalysisErrorCode.NO_DATA,
            )

        self.security: Security = positions[0].security
        self.positions: list[Position] = []
        self.add_range(positions)

    @property
    def ticker(self) -> str:
        return self.security.ticker

    def add(self, position: Position) -> None:
        if position.security != self.security:
            raise AnalysisError(
                f"Security mismatch: {position.security.ticker} added to "
                f"{self.security.ticker} summary",
                code=AnalysisErrorCode.SECURITY_MISMATCH,
            )
        self.positions.append(position)

    def add_range(self, positions: Iterable[Position]) -> None:
        for position in positions:
            self.add(position)

    # ------------------------------------------------------------ analytics

    @property
    def as_of(self) -> datetime:
        return self.security.get_last_bar(BarSize.DAILY).timestamp

    @property
    def trade_count(self) -> int:
        return sum(len(p.executed_trades) for p in self.positions)

    @property
    def days_held(self) -> int:
        as_of = self.as_of
        return sum(p.days_held(as_of) for p in self.positions)

    @property
    def position_count(self) -> int:
        return len(self.positions)

    @property
    def net_return_dollars(self) -> Decimal:
        as_of = self.as_of
        return sum((p.total_return_dollars(as_of) for p in self.positions), Decimal("0"))

    @property
    def net_return_percent(self) -> Decimal:
        as_of = self.as_of
        return sum((p.total_return_percent(as_of) for p in self.positions), Decimal("0"))

    @property
    def net_return_per_day_dollars(self) -> Decimal:
        return self.net_return_dollars / self._nonzero_days_held()

    @property
    def net_return_per_day_percent(self) -> Decimal:
        return self.net_return_percent / self._nonzero_days_held()

    @property
    def annualized_net_return_percent(self) -> Decimal:
        """Compounded yearly rate: ``(1 + r) ** (365 / days) - 1``."""
        days = self._nonzero_days_held()
        growth = 1.0 + float(self.net_return_percent)
        if growth < 0:
            raise AnalysisError(
                f"{self.ticker} lost more than its cost basis; no real annualized rate",
                code=AnalysisErrorCode.ARITHMETIC_DEGENERATE,
            )
        annualized = growth ** (365.0 / days) - 1.0
        return Decimal(str(annualized))

    def _nonzero_days_held(self) -> int:
        days = self.days_held
        if days == 0:
            raise AnalysisError(
                f"{self.ticker} positions have zero days held",
                code=AnalysisErrorCode.ARITHMETIC_DEGENERATE,
            )
        return days
