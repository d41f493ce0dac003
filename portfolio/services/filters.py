from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any

from sqlalchemy import case

from portfolio.models.calendar_event import CalendarEvent
from portfolio.models.enums import (
    ACTIVE_REPAIR_STATUSES,
    WORK_ITEM_PRIORITY_RANK,
    CalendarEventType,
    RepairStatus,
    WorkItemPriority,
    WorkItemStatus,
    WorkItemType,
)
from portfolio.models.issue import Issue
from portfolio.models.repair import Repair
from portfolio.models.todo import Todo
from portfolio.models.transaction import Transaction
from portfolio.services.month import as_aware, resolve_month_window

WorkItemModel = type[Issue] | type[Todo]

SORTABLE_WORK_ITEM_FIELDS = {
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "dueDate": "due_date",
    "priority": "priority",
    "status": "status",
    "title": "title",
    "type": "type",
}


@dataclass(slots=True, frozen=True)
class TransactionFilter:
    property_id: int | None = None
    date_from: dt.date | None = None
    date_to: dt.date | None = None


@dataclass(slots=True, frozen=True)
class RepairFilter:
    property_id: int | None = None
    statuses: tuple[RepairStatus, ...] = ()


@dataclass(slots=True, frozen=True)
class WorkItemFilter:
    property_id: int | None = None
    status: WorkItemStatus | None = None
    priority: WorkItemPriority | None = None
    type: WorkItemType | None = None
    due_date_gte: dt.date | None = None
    due_date_lte: dt.date | None = None
    exclude_statuses: tuple[WorkItemStatus, ...] = ()
    statuses: tuple[WorkItemStatus, ...] = ()


@dataclass(slots=True, frozen=True)
class WorkItemSort:
    field: str = "created_at"
    descending: bool = True


@dataclass(slots=True, frozen=True)
class CalendarEventFilter:
    start: dt.datetime | None = None
    end: dt.datetime | None = None
    property_id: int | None = None
    type: CalendarEventType | None = None


def build_transaction_filter(
    property_id: int | None = None,
    from_date: dt.date | None = None,
    to_date: dt.date | None = None,
    month: str | None = None,
) -> TransactionFilter:
    if month:
        start, end, _ = resolve_month_window(month)
        return TransactionFilter(property_id=property_id, date_from=start, date_to=end - dt.timedelta(days=1))

    # A half-open range is ignored, matching the listing's historical behavior.
    if from_date is None or to_date is None:
        return TransactionFilter(property_id=property_id)

    if from_date > to_date:
        raise ValueError("'from' must not be after 'to'")
    return TransactionFilter(property_id=property_id, date_from=from_date, date_to=to_date)


def build_repair_filter(
    property_id: int | None = None,
    status: RepairStatus | None = None,
) -> RepairFilter:
    return RepairFilter(property_id=property_id, statuses=(status,) if status is not None else ())


def active_repairs_filter() -> RepairFilter:
    return RepairFilter(statuses=ACTIVE_REPAIR_STATUSES)


def build_work_item_filter(
    property_id: int | None = None,
    status: WorkItemStatus | None = None,
    priority: WorkItemPriority | None = None,
    type: WorkItemType | None = None,
    due_date_gte: dt.date | None = None,
    due_date_lte: dt.date | None = None,
) -> WorkItemFilter:
    if due_date_gte is not None and due_date_lte is not None and due_date_gte > due_date_lte:
        raise ValueError("dueDateGte must not be after dueDateLte")
    return WorkItemFilter(
        property_id=property_id,
        status=status,
        priority=priority,
        type=type,
        due_date_gte=due_date_gte,
        due_date_lte=due_date_lte,
    )


def build_work_item_sort(sort_by: str | None, sort_order: str | None) -> WorkItemSort:
    field_name = SORTABLE_WORK_ITEM_FIELDS.get(sort_by or "createdAt")
    if field_name is None:
        allowed = ", ".join(sorted(SORTABLE_WORK_ITEM_FIELDS))
        raise ValueError(f"sortBy must be one of: {allowed}")

    order = (sort_order or "desc").lower()
    if order not in ("asc", "desc"):
        raise ValueError("sortOrder must be 'asc' or 'desc'")
    return WorkItemSort(field=field_name, descending=order == "desc")


def build_calendar_filter(
    start: dt.datetime | None = None,
    end: dt.datetime | None = None,
    property_id: int | None = None,
    type: CalendarEventType | None = None,
) -> CalendarEventFilter:
    # The window only applies when both bounds are given.
    if start is None or end is None:
        start = end = None
    else:
        start, end = as_aware(start), as_aware(end)
        if start > end:
            raise ValueError("'start' must not be after 'end'")
    return CalendarEventFilter(start=start, end=end, property_id=property_id, type=type)


def transaction_conditions(transaction_filter: TransactionFilter) -> list[Any]:
    conditions: list[Any] = []
    if transaction_filter.property_id is not None:
        conditions.append(Transaction.property_id == transaction_filter.property_id)
    if transaction_filter.date_from is not None:
        conditions.append(Transaction.tx_date >= transaction_filter.date_from)
    if transaction_filter.date_to is not None:
        conditions.append(Transaction.tx_date <= transaction_filter.date_to)
    return conditions


def repair_conditions(repair_filter: RepairFilter) -> list[Any]:
    conditions: list[Any] = []
    if repair_filter.property_id is not None:
        conditions.append(Repair.property_id == repair_filter.property_id)
    if repair_filter.statuses:
        conditions.append(Repair.status.in_(repair_filter.statuses))
    return conditions


def work_item_conditions(model: WorkItemModel, work_item_filter: WorkItemFilter) -> list[Any]:
    conditions: list[Any] = []
    if work_item_filter.property_id is not None:
        conditions.append(model.property_id == work_item_filter.property_id)
    if work_item_filter.status is not None:
        conditions.append(model.status == work_item_filter.status)
    if work_item_filter.statuses:
        conditions.append(model.status.in_(work_item_filter.statuses))
    if work_item_filter.exclude_statuses:
        conditions.append(model.status.not_in(work_item_filter.exclude_statuses))
    if work_item_filter.priority is not None:
        conditions.append(model.priority == work_item_filter.priority)
    if work_item_filter.type is not None:
        conditions.append(model.type == work_item_filter.type)
    if work_item_filter.due_date_gte is not None:
        conditions.append(model.due_date >= work_item_filter.due_date_gte)
    if work_item_filter.due_date_lte is not None:
        conditions.append(model.due_date <= work_item_filter.due_date_lte)
    return conditions


def priority_rank(model: WorkItemModel) -> Any:
    return case(
        dict(WORK_ITEM_PRIORITY_RANK),
        value=model.priority,
        else_=-1,
    )


def work_item_order_by(model: WorkItemModel, sort: WorkItemSort) -> list[Any]:
    column = priority_rank(model) if sort.field == "priority" else getattr(model, sort.field)
    primary = column.desc() if sort.descending else column.asc()
    return [primary, model.id.desc() if sort.descending else model.id.asc()]


def calendar_conditions(calendar_filter: CalendarEventFilter) -> list[Any]:
    conditions: list[Any] = []
    if calendar_filter.start is not None and calendar_filter.end is not None:
        conditions.append(CalendarEvent.start >= calendar_filter.start)
        conditions.append(CalendarEvent.start <= calendar_filter.end)
    if calendar_filter.property_id is not None:
        conditions.append(CalendarEvent.property_id == calendar_filter.property_id)
    if calendar_filter.type is not None:
        conditions.append(CalendarEvent.type == calendar_filter.type)
    return conditions
