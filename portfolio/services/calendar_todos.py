import datetime as dt
from dataclasses import dataclass

from portfolio.models.enums import CalendarEventType, WorkItemPriority, WorkItemStatus, WorkItemType

EVENT_TYPE_TO_TODO_TYPE = {
    CalendarEventType.REPAIR: WorkItemType.REPAIR,
    CalendarEventType.MAINTENANCE: WorkItemType.MAINTENANCE,
    CalendarEventType.INSPECTION: WorkItemType.INSPECTION,
    CalendarEventType.TAX: WorkItemType.OTHER,
    CalendarEventType.OTHER: WorkItemType.OTHER,
}

# The calendar form offers COMPLETED, todos call it RESOLVED.
CALENDAR_TODO_STATUS = {
    "OPEN": WorkItemStatus.OPEN,
    "IN_PROGRESS": WorkItemStatus.IN_PROGRESS,
    "COMPLETED": WorkItemStatus.RESOLVED,
}


@dataclass(slots=True)
class LinkedTodoDraft:
    title: str
    description: str | None
    status: WorkItemStatus
    priority: WorkItemPriority
    type: WorkItemType
    due_date: dt.date
    property_id: int


def draft_todo_for_event(
    *,
    title: str,
    description: str | None,
    event_type: CalendarEventType,
    start: dt.datetime,
    end: dt.datetime | None,
    property_id: int,
    status: str | None = None,
    priority: WorkItemPriority | None = None,
) -> LinkedTodoDraft:
    resolved_status = CALENDAR_TODO_STATUS.get((status or "OPEN").upper())
    if resolved_status is None:
        raise ValueError(f"Unsupported todo status '{status}'")

    due = end or start
    return LinkedTodoDraft(
        title=title,
        description=description,
        status=resolved_status,
        priority=priority or WorkItemPriority.MEDIUM,
        type=EVENT_TYPE_TO_TODO_TYPE[event_type],
        due_date=due.date(),
        property_id=property_id,
    )
