import datetime as dt

from portfolio.models.enums import RepairStatus, WorkItemPriority, WorkItemStatus, WorkItemType
from portfolio.schemas.base import ApiModel, ApiReadModel, Money


class MonthBucketRead(ApiReadModel):
    month: int
    month_name: str
    income: Money
    expenses: Money
    net_income: Money
    mom_income_change: Money
    mom_expenses_change: Money
    mom_net_income_change: Money


class YearSummaryRead(ApiReadModel):
    monthly_data: list[MonthBucketRead]
    ytd_income: Money
    ytd_expenses: Money
    ytd_net_income: Money
    target_year: int
    requested_year: int
    fell_back: bool


class DashboardMetricsRead(ApiReadModel):
    total_properties: int
    total_value: Money
    monthly_income: Money
    active_repairs: int


class ActiveRepairItem(ApiModel):
    id: int
    item: str
    location: str
    status: RepairStatus
    cost: Money
    estimated_completion_date: dt.date | None


class ActiveRepairsResponse(ApiModel):
    active_repairs: list[ActiveRepairItem]
    total_repair_cost: Money


class TopIssueItem(ApiModel):
    id: int
    title: str
    status: WorkItemStatus
    priority: WorkItemPriority
    type: WorkItemType
    due_date: dt.date | None
    property_id: int
    property_address: str


class TopIssuesResponse(ApiModel):
    top_issues: list[TopIssueItem]
    total_open_issues: int
