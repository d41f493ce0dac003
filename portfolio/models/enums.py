from enum import Enum

from sqlalchemy import Enum as SAEnum


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class RepairStatus(str, Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class RepairPriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class WorkItemStatus(str, Enum):
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    BLOCKED = "BLOCKED"
    RESOLVED = "RESOLVED"
    CLOSED = "CLOSED"


class WorkItemPriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


class WorkItemType(str, Enum):
    MAINTENANCE = "MAINTENANCE"
    REPAIR = "REPAIR"
    COMPLAINT = "COMPLAINT"
    INSPECTION = "INSPECTION"
    OTHER = "OTHER"


class CalendarEventType(str, Enum):
    REPAIR = "REPAIR"
    MAINTENANCE = "MAINTENANCE"
    INSPECTION = "INSPECTION"
    TAX = "TAX"
    OTHER = "OTHER"


ACTIVE_REPAIR_STATUSES = (RepairStatus.PENDING, RepairStatus.IN_PROGRESS)
OPEN_WORK_ITEM_STATUSES = (WorkItemStatus.OPEN, WorkItemStatus.IN_PROGRESS, WorkItemStatus.BLOCKED)

# Declaration order doubles as sort rank.
WORK_ITEM_PRIORITY_RANK = {priority: rank for rank, priority in enumerate(WorkItemPriority)}


def string_enum(enum_cls: type[Enum], length: int = 16) -> SAEnum:
    return SAEnum(
        enum_cls,
        native_enum=False,
        length=length,
        values_callable=lambda cls: [item.value for item in cls],
    )


transaction_type_enum = string_enum(TransactionType)
repair_status_enum = string_enum(RepairStatus)
repair_priority_enum = string_enum(RepairPriority)
work_item_status_enum = string_enum(WorkItemStatus)
work_item_priority_enum = string_enum(WorkItemPriority)
work_item_type_enum = string_enum(WorkItemType)
calendar_event_type_enum = string_enum(CalendarEventType)
