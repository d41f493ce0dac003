"""Monthly income/expense rollups for the portfolio dashboard.

Expenses are kept as positive magnitudes in every bucket and net income is
``income - expenses``. Month-over-month changes are percentages rounded to
two decimal places.
"""
from __future__ import annotations

import calendar
import datetime as dt
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

from portfolio.models.enums import TransactionType
from portfolio.services.month import resolve_year_window

if TYPE_CHECKING:
    from portfolio.services.stores import TransactionStore

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")
PERCENT_STEP = Decimal("0.01")


@dataclass(slots=True, frozen=True)
class LedgerEntry:
    tx_date: dt.date
    amount: Decimal
    type: TransactionType | str


@dataclass(slots=True)
class MonthBucket:
    month: int
    income: Decimal = ZERO
    expenses: Decimal = ZERO
    net_income: Decimal = ZERO
    mom_income_change: Decimal = ZERO
    mom_expenses_change: Decimal = ZERO
    mom_net_income_change: Decimal = ZERO

    @property
    def month_name(self) -> str:
        return calendar.month_abbr[self.month]

    @property
    def has_activity(self) -> bool:
        return self.income != ZERO or self.expenses != ZERO


@dataclass(slots=True)
class YearSummary:
    target_year: int
    requested_year: int
    monthly_data: list[MonthBucket] = field(default_factory=list)
    ytd_income: Decimal = ZERO
    ytd_expenses: Decimal = ZERO
    ytd_net_income: Decimal = ZERO

    @property
    def fell_back(self) -> bool:
        return self.target_year != self.requested_year


def normalize_type(value: TransactionType | str) -> TransactionType | None:
    raw = value.value if isinstance(value, Enum) else str(value)
    try:
        return TransactionType(raw.strip().lower())
    except ValueError:
        return None


def percent_change(current: Decimal, previous: Decimal) -> Decimal:
    if previous == ZERO:
        return ZERO
    return ((current - previous) / abs(previous) * HUNDRED).quantize(PERCENT_STEP)


def _as_decimal(amount: Decimal | int | float | str) -> Decimal:
    if isinstance(amount, Decimal):
        return amount
    return Decimal(str(amount))


def _recognized(entries: Iterable[LedgerEntry]) -> list[LedgerEntry]:
    return [entry for entry in entries if normalize_type(entry.type) is not None]


def most_recent_entry(entries: Iterable[LedgerEntry]) -> LedgerEntry | None:
    latest: LedgerEntry | None = None
    for entry in _recognized(entries):
        if latest is None or entry.tx_date > latest.tx_date:
            latest = entry
    return latest


def build_month_buckets(entries: Iterable[LedgerEntry], year: int) -> list[MonthBucket]:
    """Twelve buckets for ``year`` in calendar order, zero filled."""
    buckets = [MonthBucket(month=month) for month in range(1, 13)]

    for entry in entries:
        if entry.tx_date.year != year:
            continue
        tx_type = normalize_type(entry.type)
        bucket = buckets[entry.tx_date.month - 1]
        amount = _as_decimal(entry.amount)
        if tx_type == TransactionType.INCOME:
            bucket.income += amount
        elif tx_type == TransactionType.EXPENSE:
            bucket.expenses += abs(amount)

    previous: MonthBucket | None = None
    for bucket in buckets:
        bucket.net_income = bucket.income - bucket.expenses
        if previous is not None:
            bucket.mom_income_change = percent_change(bucket.income, previous.income)
            bucket.mom_expenses_change = percent_change(bucket.expenses, previous.expenses)
            bucket.mom_net_income_change = percent_change(bucket.net_income, previous.net_income)
        previous = bucket

    return buckets


def compute_year_summary(entries: Iterable[LedgerEntry], target_year: int) -> YearSummary:
    """Roll ``entries`` up into a twelve month summary of ``target_year``.

    When the target year holds no income or expense entry, the summary is
    built for the year of the most recent entry instead. ``requested_year``
    keeps the original request so callers can tell the two apart.
    """
    recognized = _recognized(entries)
    year = target_year

    if not any(entry.tx_date.year == target_year for entry in recognized):
        latest = most_recent_entry(recognized)
        if latest is not None:
            year = latest.tx_date.year
            logger.warning(
                "No transactions in %s, falling back to most recent year %s",
                target_year,
                year,
            )

    buckets = build_month_buckets(recognized, year)
    ytd_income = sum((bucket.income for bucket in buckets), ZERO)
    ytd_expenses = sum((bucket.expenses for bucket in buckets), ZERO)

    return YearSummary(
        target_year=year,
        requested_year=target_year,
        monthly_data=buckets,
        ytd_income=ytd_income,
        ytd_expenses=ytd_expenses,
        ytd_net_income=ytd_income - ytd_expenses,
    )


async def load_year_summary(store: TransactionStore, target_year: int) -> YearSummary:
    start, end = resolve_year_window(target_year)
    entries = list(await store.find_by_date_range(start, end))

    if not _recognized(entries):
        latest = await store.find_most_recent()
        if latest is not None and latest.tx_date.year != target_year:
            start, end = resolve_year_window(latest.tx_date.year)
            entries = list(await store.find_by_date_range(start, end))

    return compute_year_summary(entries, target_year)


def select_current_bucket(summary: YearSummary, today: dt.date) -> MonthBucket:
    """Bucket shown as "this month" on the dashboard.

    After a fallback the current month is meaningless for the substituted
    year, so the latest month with activity is used.
    """
    if summary.fell_back:
        active = [bucket for bucket in summary.monthly_data if bucket.has_activity]
        if active:
            return active[-1]
    return summary.monthly_data[today.month - 1]
