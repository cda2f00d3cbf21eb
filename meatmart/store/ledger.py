"""Running sales totals by day, week and month."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from ..models import SaleEvent, to_decimal

WeekKey = tuple[int, int]  # (year, week of year)
MonthKey = tuple[int, int]  # (year, month)


def week_of_year(d: date) -> int:
    """Week number with weeks starting on Sunday.

    Week 1 is the week containing January 1, so the first week of a year
    may have fewer than seven days.
    """
    jan1 = date(d.year, 1, 1)
    # Days between the Sunday that opens week 1 and January 1.
    offset = (jan1.weekday() + 1) % 7
    return (d.timetuple().tm_yday - 1 + offset) // 7 + 1


@dataclass(frozen=True)
class SalesReport:
    """Cumulative amounts per bucket, in first-recorded order."""

    daily: tuple[tuple[date, Decimal], ...] = ()
    weekly: tuple[tuple[WeekKey, Decimal], ...] = ()
    monthly: tuple[tuple[MonthKey, Decimal], ...] = ()

    @property
    def total(self) -> Decimal:
        return sum((amount for _, amount in self.daily), Decimal("0"))

    @property
    def empty(self) -> bool:
        return not self.daily


class SalesLedger:
    """Aggregates sale events into day, week and month buckets.

    Week and month keys carry the year so runs spanning a new year never
    merge unrelated periods. Nothing here is persisted.
    """

    def __init__(self) -> None:
        self._daily: dict[date, Decimal] = {}
        self._weekly: dict[WeekKey, Decimal] = {}
        self._monthly: dict[MonthKey, Decimal] = {}

    def record_sale(self, timestamp: datetime, amount: object) -> None:
        amount = to_decimal(amount, "amount")
        day = timestamp.date() if isinstance(timestamp, datetime) else timestamp
        week = (day.year, week_of_year(day))
        month = (day.year, day.month)
        self._daily[day] = self._daily.get(day, Decimal("0")) + amount
        self._weekly[week] = self._weekly.get(week, Decimal("0")) + amount
        self._monthly[month] = self._monthly.get(month, Decimal("0")) + amount

    def record(self, event: SaleEvent) -> None:
        self.record_sale(event.timestamp, event.amount)

    def day_total(self, day: date) -> Decimal:
        return self._daily.get(day, Decimal("0"))

    def week_total(self, year: int, week: int) -> Decimal:
        return self._weekly.get((year, week), Decimal("0"))

    def month_total(self, year: int, month: int) -> Decimal:
        return self._monthly.get((year, month), Decimal("0"))

    @property
    def total(self) -> Decimal:
        return sum(self._daily.values(), Decimal("0"))

    def report(self) -> SalesReport:
        return SalesReport(
            daily=tuple(self._daily.items()),
            weekly=tuple(self._weekly.items()),
            monthly=tuple(self._monthly.items()),
        )
