import datetime as dt

import pytest

from portfolio.models.enums import RepairStatus, WorkItemStatus
from portfolio.models.issue import Issue
from portfolio.models.todo import Todo
from portfolio.services.filters import (
    WorkItemFilter,
    active_repairs_filter,
    build_calendar_filter,
    build_repair_filter,
    build_transaction_filter,
    build_work_item_filter,
    build_work_item_sort,
    repair_conditions,
    transaction_conditions,
    work_item_conditions,
    work_item_order_by,
)


def test_transaction_filter_from_month() -> None:
    transaction_filter = build_transaction_filter(property_id=3, month="2024-02")

    assert transaction_filter.property_id == 3
    assert transaction_filter.date_from == dt.date(2024, 2, 1)
    assert transaction_filter.date_to == dt.date(2024, 2, 29)
    assert len(transaction_conditions(transaction_filter)) == 3


def test_transaction_filter_ignores_half_open_range() -> None:
    transaction_filter = build_transaction_filter(from_date=dt.date(2024, 1, 1))

    assert transaction_filter.date_from is None
    assert transaction_filter.date_to is None
    assert transaction_conditions(transaction_filter) == []


def test_transaction_filter_rejects_inverted_range() -> None:
    with pytest.raises(ValueError, match="'from' must not be after 'to'"):
        build_transaction_filter(from_date=dt.date(2024, 2, 1), to_date=dt.date(2024, 1, 1))


def test_active_repairs_filter_covers_pending_and_in_progress() -> None:
    repair_filter = active_repairs_filter()

    assert set(repair_filter.statuses) == {RepairStatus.PENDING, RepairStatus.IN_PROGRESS}
    assert len(repair_conditions(repair_filter)) == 1


def test_repair_filter_with_single_status() -> None:
    repair_filter = build_repair_filter(property_id=1, status=RepairStatus.COMPLETED)

    assert repair_filter.statuses == (RepairStatus.COMPLETED,)
    assert len(repair_conditions(repair_filter)) == 2


def test_work_item_filter_rejects_inverted_due_window() -> None:
    with pytest.raises(ValueError, match="dueDateGte"):
        build_work_item_filter(due_date_gte=dt.date(2024, 5, 2), due_date_lte=dt.date(2024, 5, 1))


def test_work_item_conditions_apply_to_issues_and_todos() -> None:
    work_item_filter = WorkItemFilter(
        property_id=1,
        exclude_statuses=(WorkItemStatus.RESOLVED,),
        due_date_lte=dt.date(2024, 5, 1),
    )

    assert len(work_item_conditions(Issue, work_item_filter)) == 3
    assert len(work_item_conditions(Todo, work_item_filter)) == 3


def test_work_item_sort_defaults_to_newest_first() -> None:
    sort = build_work_item_sort(None, None)

    assert sort.field == "created_at"
    assert sort.descending


def test_work_item_sort_maps_camel_case_fields() -> None:
    sort = build_work_item_sort("dueDate", "ASC")

    assert sort.field == "due_date"
    assert not sort.descending
    assert len(work_item_order_by(Todo, sort)) == 2


def test_work_item_sort_rejects_unknown_field() -> None:
    with pytest.raises(ValueError, match="sortBy must be one of"):
        build_work_item_sort("password", "asc")


def test_work_item_sort_rejects_unknown_order() -> None:
    with pytest.raises(ValueError, match="sortOrder"):
        build_work_item_sort("title", "sideways")


def test_priority_sort_uses_rank_expression() -> None:
    sort = build_work_item_sort("priority", "desc")
    clauses = work_item_order_by(Issue, sort)

    assert "CASE" in str(clauses[0]).upper()


def test_calendar_filter_needs_both_bounds() -> None:
    start = dt.datetime(2024, 1, 1, tzinfo=dt.timezone.utc)

    assert build_calendar_filter(start=start).start is None
    with pytest.raises(ValueError, match="'start' must not be after 'end'"):
        build_calendar_filter(start=start, end=start - dt.timedelta(days=1))


def test_calendar_filter_compares_naive_bound_as_utc() -> None:
    start = dt.datetime(2024, 1, 1, 12, tzinfo=dt.timezone.utc)

    calendar_filter = build_calendar_filter(start=start, end=dt.datetime(2024, 1, 2))

    assert calendar_filter.end == dt.datetime(2024, 1, 2, tzinfo=dt.timezone.utc)
    with pytest.raises(ValueError, match="'start' must not be after 'end'"):
        build_calendar_filter(start=start, end=dt.datetime(2024, 1, 1, 11))
