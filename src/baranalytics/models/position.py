"""Position and trade records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from baranalytics.errors import AnalysisError, AnalysisErrorCode
from baranalytics.models.bar import BarSize
from baranalytics.models.security import Security


@dataclass(frozen=True)
class Trade:
    """Single executed trade.

    Attributes:
        timestamp: Execution time.
        quantity: Signed quantity; positive buys, negative sells.
        price: Execution price.
        commission: Commission paid on the execution.
    """

    timestamp: datetime
    quantity: Decimal
    price: Decimal
    commission: Decimal = Decimal("0")


@dataclass
class Position:
    """One held lot of a security and the trades that built it.

    The first trade sets the direction of the position. The position is
    closed by the first trade that brings the running quantity back to
    zero.
    """

    security: Security
    trades: list[Trade] = field(default_factory=list)

    @property
    def executed_trades(self) -> list[Trade]:
        return list(self.trades)

    def trades_through(self, as_of: date | datetime) -> list[Trade]:
        """Trades executed on or before ``as_of``."""
        return [t for t in self.trades if _as_date(t.timestamp) <= _as_date(as_of)]

    def closed_at(self, as_of: date | datetime) -> datetime | None:
        """Time of the trade that flattened the position, if it had by ``as_of``."""
        running = Decimal("0")
        for t in self.trades_through(as_of):
            running += t.quantity
            if running == 0:
                return t.timestamp
        return None

    def days_held(self, as_of: date | datetime) -> int:
        """Calendar days from the opening trade to the close (or ``as_of``)."""
        trades = self.trades_through(as_of)
        if not trades:
            return 0
        end = self.closed_at(as_of) or as_of
        return (_as_date(end) - _as_date(trades[0].timestamp)).days

    def total_return_dollars(self, as_of: date | datetime) -> Decimal:
        """Realized cash flow plus open quantity marked at the ``as_of`` close."""
        trades = self.trades_through(as_of)
        cash = sum((-t.quantity * t.price - t.commission for t in trades), Decimal("0"))
        open_qty = sum((t.quantity for t in trades), Decimal("0"))
        if open_qty:
            bars = self.security.get_bars(BarSize.DAILY)
            mark = bars[bars.index_at_or_before(as_of)].close
            cash += open_qty * mark
        return cash

    def total_return_percent(self, as_of: date | datetime) -> Decimal:
        """Dollar return as a fraction of the opening-side cost basis."""
        basis = self.cost_basis(as_of)
        if basis == 0:
            raise AnalysisError(
                f"Position in {self.security.ticker} has no cost basis",
                code=AnalysisErrorCode.ARITHMETIC_DEGENERATE,
            )
        return self.total_return_dollars(as_of) / basis

    def cost_basis(self, as_of: date | datetime) -> Decimal:
        """Notional of the opening-side trades executed by ``as_of``."""
        trades = self.trades_through(as_of)
        if not trades:
            return Decimal("0")
        long = trades[0].quantity > 0
        return sum(
            (abs(t.quantity) * t.price for t in trades if (t.quantity > 0) == long),
            Decimal("0"),
        )


def _as_date(when: date | datetime) -> date:
    return when.date() if isinstance(when, datetime) else when
