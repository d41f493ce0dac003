from decimal import Decimal

from fastapi import APIRouter, Depends, Query
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from portfolio.db.session import get_session
from portfolio.models.enums import OPEN_WORK_ITEM_STATUSES, WorkItemStatus
from portfolio.models.issue import Issue
from portfolio.models.repair import Repair
from portfolio.models.todo import Todo
from portfolio.schemas.dashboard import (
    ActiveRepairItem,
    ActiveRepairsResponse,
    DashboardMetricsRead,
    TopIssueItem,
    TopIssuesResponse,
    YearSummaryRead,
)
from portfolio.schemas.todo import TodoRead
from portfolio.services.dashboard import assemble_dashboard_metrics
from portfolio.services.filters import (
    WorkItemFilter,
    active_repairs_filter,
    priority_rank,
    repair_conditions,
    work_item_conditions,
)
from portfolio.services.month import parse_year
from portfolio.services.reporting import load_year_summary
from portfolio.services.stores import (
    PropertyStore,
    RepairStore,
    TransactionStore,
    get_property_store,
    get_repair_store,
    get_transaction_store,
)

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])

DASHBOARD_LIST_SIZE = 5


@router.get("/metrics", response_model=DashboardMetricsRead)
async def dashboard_metrics(
    properties: PropertyStore = Depends(get_property_store),
    transactions: TransactionStore = Depends(get_transaction_store),
    repairs: RepairStore = Depends(get_repair_store),
) -> DashboardMetricsRead:
    metrics = await assemble_dashboard_metrics(properties, transactions, repairs)
    return DashboardMetricsRead.model_validate(metrics)


@router.get("/monthly-income", response_model=YearSummaryRead)
async def monthly_income(
    year: str | None = Query(default=None, description="Calendar year, defaults to the current one"),
    store: TransactionStore = Depends(get_transaction_store),
) -> YearSummaryRead:
    summary = await load_year_summary(store, parse_year(year))
    return YearSummaryRead.model_validate(summary)


@router.get("/repairs", response_model=ActiveRepairsResponse)
async def active_repairs(session: AsyncSession = Depends(get_session)) -> ActiveRepairsResponse:
    rows = await session.scalars(
        select(Repair)
        .options(selectinload(Repair.property))
        .where(*repair_conditions(active_repairs_filter()))
        .order_by(Repair.repair_date.asc(), Repair.id.asc())
    )
    repairs = rows.all()
    items = [
        ActiveRepairItem(
            id=repair.id,
            item=repair.item,
            location=repair.property.address if repair.property else "Unknown",
            status=repair.status,
            cost=repair.cost,
            estimated_completion_date=repair.estimated_completion_date,
        )
        for repair in repairs
    ]
    return ActiveRepairsResponse(
        active_repairs=items,
        total_repair_cost=sum((repair.cost for repair in repairs), Decimal("0")),
    )


@router.get("/issues", response_model=TopIssuesResponse)
async def top_issues(session: AsyncSession = Depends(get_session)) -> TopIssuesResponse:
    open_filter = WorkItemFilter(statuses=OPEN_WORK_ITEM_STATUSES)
    conditions = work_item_conditions(Issue, open_filter)

    total_open = await session.scalar(select(func.count(Issue.id)).where(*conditions))
    rows = await session.scalars(
        select(Issue)
        .options(selectinload(Issue.property))
        .where(*conditions)
        .order_by(priority_rank(Issue).desc(), Issue.due_date.asc().nulls_last(), Issue.id.asc())
        .limit(DASHBOARD_LIST_SIZE)
    )
    return TopIssuesResponse(
        top_issues=[
            TopIssueItem(
                id=issue.id,
                title=issue.title,
                status=issue.status,
                priority=issue.priority,
                type=issue.type,
                due_date=issue.due_date,
                property_id=issue.property_id,
                property_address=issue.property.address if issue.property else "Unknown",
            )
            for issue in rows.all()
        ],
        total_open_issues=total_open or 0,
    )


@router.get("/todos", response_model=list[TodoRead])
async def upcoming_todos(session: AsyncSession = Depends(get_session)) -> list[TodoRead]:
    pending_filter = WorkItemFilter(exclude_statuses=(WorkItemStatus.RESOLVED,))
    rows = await session.scalars(
        select(Todo)
        .options(selectinload(Todo.property), selectinload(Todo.repair), selectinload(Todo.tenant))
        .where(*work_item_conditions(Todo, pending_filter))
        .order_by(Todo.due_date.asc().nulls_last(), Todo.id.asc())
        .limit(DASHBOARD_LIST_SIZE)
    )
    return [TodoRead.model_validate(todo) for todo in rows.all()]
