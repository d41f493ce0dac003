from portfolio.schemas.calendar import CalendarEventCreate, CalendarEventCreated, CalendarEventRead, CalendarEventUpdate
from portfolio.schemas.dashboard import (
    ActiveRepairItem,
    ActiveRepairsResponse,
    DashboardMetricsRead,
    MonthBucketRead,
    TopIssueItem,
    TopIssuesResponse,
    YearSummaryRead,
)
from portfolio.schemas.issue import IssueCreate, IssueRead, IssueUpdate
from portfolio.schemas.property import PropertyCreate, PropertyRead, PropertySummary, PropertyUpdate
from portfolio.schemas.repair import RepairCreate, RepairRead, RepairUpdate
from portfolio.schemas.tenant import TenantCreate, TenantRead, TenantUpdate
from portfolio.schemas.todo import TodoCreate, TodoRead, TodoUpdate
from portfolio.schemas.transaction import TransactionCreate, TransactionRead

__all__ = [
    "ActiveRepairItem",
    "ActiveRepairsResponse",
    "CalendarEventCreate",
    "CalendarEventCreated",
    "CalendarEventRead",
    "CalendarEventUpdate",
    "DashboardMetricsRead",
    "IssueCreate",
    "IssueRead",
    "IssueUpdate",
    "MonthBucketRead",
    "PropertyCreate",
    "PropertyRead",
    "PropertySummary",
    "PropertyUpdate",
    "RepairCreate",
    "RepairRead",
    "RepairUpdate",
    "TenantCreate",
    "TenantRead",
    "TenantUpdate",
    "TodoCreate",
    "TodoRead",
    "TodoUpdate",
    "TopIssueItem",
    "TopIssuesResponse",
    "TransactionCreate",
    "TransactionRead",
    "YearSummaryRead",
]
