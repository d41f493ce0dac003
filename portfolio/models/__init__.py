from portfolio.models.calendar_event import CalendarEvent
from portfolio.models.enums import (
    CalendarEventType,
    RepairPriority,
    RepairStatus,
    TransactionType,
    WorkItemPriority,
    WorkItemStatus,
    WorkItemType,
)
from portfolio.models.issue import Issue
from portfolio.models.property import Property
from portfolio.models.repair import Repair
from portfolio.models.tenant import Tenant
from portfolio.models.todo import Todo
from portfolio.models.transaction import Transaction

__all__ = [
    "CalendarEvent",
    "CalendarEventType",
    "Issue",
    "Property",
    "Repair",
    "RepairPriority",
    "RepairStatus",
    "Tenant",
    "Todo",
    "Transaction",
    "TransactionType",
    "WorkItemPriority",
    "WorkItemStatus",
    "WorkItemType",
]
