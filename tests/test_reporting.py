import datetime as dt
from decimal import Decimal

from portfolio.models.enums import TransactionType
from portfolio.services.reporting import (
    LedgerEntry,
    compute_year_summary,
    normalize_type,
    percent_change,
    select_current_bucket,
)


def _entry(day: dt.date, amount: str, tx_type: TransactionType | str) -> LedgerEntry:
    return LedgerEntry(tx_date=day, amount=Decimal(amount), type=tx_type)


def _sample_2024() -> list[LedgerEntry]:
    return [
        _entry(dt.date(2024, 1, 15), "1000", "INCOME"),
        _entry(dt.date(2024, 2, 15), "1200", "INCOME"),
        _entry(dt.date(2024, 2, 20), "300", "EXPENSE"),
    ]


def test_worked_example_matches_month_buckets() -> None:
    summary = compute_year_summary(_sample_2024(), 2024)

    january, february = summary.monthly_data[0], summary.monthly_data[1]
    assert january.income == Decimal("1000")
    assert february.income == Decimal("1200")
    assert february.expenses == Decimal("300")
    assert february.net_income == Decimal("900")
    assert february.mom_income_change == Decimal("20")
    assert summary.target_year == 2024
    assert not summary.fell_back


def test_always_twelve_buckets_in_calendar_order() -> None:
    summary = compute_year_summary(_sample_2024(), 2024)

    assert [bucket.month for bucket in summary.monthly_data] == list(range(1, 13))
    assert summary.monthly_data[0].month_name == "Jan"
    assert summary.monthly_data[11].month_name == "Dec"


def test_empty_month_is_zero_filled() -> None:
    summary = compute_year_summary(_sample_2024(), 2024)
    march = summary.monthly_data[2]

    assert march.income == Decimal("0")
    assert march.expenses == Decimal("0")
    assert march.net_income == Decimal("0")
    assert not march.has_activity


def test_type_is_case_insensitive() -> None:
    lower = compute_year_summary([_entry(dt.date(2024, 5, 1), "250", "income")], 2024)
    upper = compute_year_summary([_entry(dt.date(2024, 5, 1), "250", "INCOME")], 2024)
    member = compute_year_summary([_entry(dt.date(2024, 5, 1), "250", TransactionType.INCOME)], 2024)

    assert lower == upper == member
    assert lower.monthly_data[4].income == Decimal("250")


def test_unknown_types_are_ignored() -> None:
    summary = compute_year_summary(
        [_entry(dt.date(2024, 3, 1), "999", "transfer"), _entry(dt.date(2024, 3, 2), "10", "Income")],
        2024,
    )

    assert summary.ytd_income == Decimal("10")
    assert summary.ytd_expenses == Decimal("0")


def test_expenses_are_positive_magnitudes() -> None:
    summary = compute_year_summary([_entry(dt.date(2024, 6, 1), "-80", "expense")], 2024)

    assert summary.monthly_data[5].expenses == Decimal("80")
    assert summary.monthly_data[5].net_income == Decimal("-80")


def test_month_over_month_is_zero_for_january_and_after_empty_month() -> None:
    entries = [
        _entry(dt.date(2024, 1, 10), "500", "income"),
        _entry(dt.date(2024, 3, 10), "700", "income"),
    ]
    summary = compute_year_summary(entries, 2024)

    assert summary.monthly_data[0].mom_income_change == Decimal("0")
    assert summary.monthly_data[1].mom_income_change == Decimal("-100")
    assert summary.monthly_data[2].mom_income_change == Decimal("0")


def test_year_to_date_totals() -> None:
    summary = compute_year_summary(_sample_2024(), 2024)

    assert summary.ytd_income == sum((bucket.income for bucket in summary.monthly_data), Decimal("0"))
    assert summary.ytd_expenses == Decimal("300")
    assert summary.ytd_net_income == summary.ytd_income - summary.ytd_expenses


def test_entries_outside_target_year_are_ignored() -> None:
    entries = _sample_2024() + [_entry(dt.date(2023, 12, 31), "5000", "income")]
    summary = compute_year_summary(entries, 2024)

    assert summary.ytd_income == Decimal("2200")


def test_falls_back_to_most_recent_year() -> None:
    entries = [
        _entry(dt.date(2022, 4, 1), "1500", "income"),
        _entry(dt.date(2022, 9, 1), "2500", "income"),
        _entry(dt.date(2022, 9, 3), "400", "expense"),
    ]

    summary = compute_year_summary(entries, 2025)

    assert summary.target_year == 2022
    assert summary.requested_year == 2025
    assert summary.fell_back
    assert summary.ytd_income == Decimal("4000")


def test_fallback_is_logged(caplog) -> None:
    with caplog.at_level("WARNING", logger="portfolio.services.reporting"):
        compute_year_summary([_entry(dt.date(2022, 4, 1), "10", "income")], 2025)

    assert "falling back" in caplog.text


def test_no_entries_gives_zero_summary_for_requested_year() -> None:
    summary = compute_year_summary([], 2025)

    assert summary.target_year == 2025
    assert not summary.fell_back
    assert len(summary.monthly_data) == 12
    assert summary.ytd_income == Decimal("0")
    assert summary.ytd_net_income == Decimal("0")


def test_summary_is_idempotent() -> None:
    entries = _sample_2024()

    assert compute_year_summary(entries, 2024) == compute_year_summary(entries, 2024)


def test_percent_change_rounding() -> None:
    assert percent_change(Decimal("1"), Decimal("3")) == Decimal("-66.67")
    assert percent_change(Decimal("5"), Decimal("0")) == Decimal("0")
    assert percent_change(Decimal("-50"), Decimal("-100")) == Decimal("50")


def test_normalize_type() -> None:
    assert normalize_type(" Expense ") == TransactionType.EXPENSE
    assert normalize_type(TransactionType.INCOME) == TransactionType.INCOME
    assert normalize_type("refund") is None


def test_current_bucket_uses_latest_active_month_after_fallback() -> None:
    entries = [
        _entry(dt.date(2022, 4, 1), "1500", "income"),
        _entry(dt.date(2022, 9, 1), "2500", "income"),
    ]
    summary = compute_year_summary(entries, 2025)

    bucket = select_current_bucket(summary, dt.date(2025, 2, 14))

    assert bucket.month == 9
    assert bucket.income == Decimal("2500")


def test_current_bucket_is_todays_month_without_fallback() -> None:
    summary = compute_year_summary(_sample_2024(), 2024)

    assert select_current_bucket(summary, dt.date(2024, 2, 29)).income == Decimal("1200")
    assert select_current_bucket(summary, dt.date(2024, 7, 1)).income == Decimal("0")
