import datetime as dt
import logging
from collections.abc import Sequence
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.models.enums import TransactionType, WorkItemPriority, WorkItemStatus, WorkItemType
from portfolio.models.property import Property
from portfolio.models.todo import Todo
from portfolio.models.transaction import Transaction

logger = logging.getLogger(__name__)

# (income, expenses) for the current month and the five before it, newest first.
DEMO_MONTHLY_AMOUNTS: Sequence[tuple[Decimal, Decimal]] = (
    (Decimal("5200"), Decimal("1350")),
    (Decimal("4800"), Decimal("900")),
    (Decimal("6100"), Decimal("2250")),
    (Decimal("3900"), Decimal("700")),
    (Decimal("5500"), Decimal("1600")),
    (Decimal("4300"), Decimal("1100")),
)

DEMO_TODOS: Sequence[tuple[str, str, WorkItemStatus, WorkItemPriority, WorkItemType, int]] = (
    ("Fix leaking faucet", "Kitchen sink faucet is leaking", WorkItemStatus.OPEN, WorkItemPriority.HIGH, WorkItemType.REPAIR, 7),
    (
        "Schedule annual inspection",
        "Annual property inspection due",
        WorkItemStatus.IN_PROGRESS,
        WorkItemPriority.MEDIUM,
        WorkItemType.INSPECTION,
        14,
    ),
    (
        "Replace air filter",
        "HVAC air filter needs replacement",
        WorkItemStatus.BLOCKED,
        WorkItemPriority.LOW,
        WorkItemType.MAINTENANCE,
        30,
    ),
    (
        "Respond to tenant complaint",
        "Tenant reported noise from upstairs unit",
        WorkItemStatus.OPEN,
        WorkItemPriority.HIGH,
        WorkItemType.COMPLAINT,
        2,
    ),
)


def months_back(today: dt.date, count: int) -> list[dt.date]:
    """First day of the current month and the ``count - 1`` months before it."""
    firsts = []
    year, month = today.year, today.month
    for _ in range(count):
        firsts.append(dt.date(year, month, 1))
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return firsts


async def seed_demo_data(session: AsyncSession, today: dt.date | None = None) -> None:
    existing = await session.scalar(select(func.count(Property.id)))
    if existing:
        logger.info("Skipping demo seed, %s properties already present", existing)
        return

    today = today or dt.date.today()
    demo_property = Property(
        address="123 Test Street",
        city="Test City",
        state="TS",
        zip_code="12345",
        type="RESIDENTIAL",
        market_value=Decimal("500000"),
        purchase_price=Decimal("450000"),
        purchase_date=dt.date(2023, 1, 1),
        description="Test property for dashboard metrics",
    )
    session.add(demo_property)
    await session.flush()

    for month_start, (income, expenses) in zip(months_back(today, len(DEMO_MONTHLY_AMOUNTS)), DEMO_MONTHLY_AMOUNTS):
        session.add(
            Transaction(
                description="Monthly rent payment",
                amount=income,
                type=TransactionType.INCOME,
                category="RENT",
                tx_date=month_start,
                property_id=demo_property.id,
            )
        )
        session.add(
            Transaction(
                description="Monthly maintenance expenses",
                amount=expenses,
                type=TransactionType.EXPENSE,
                category="MAINTENANCE",
                tx_date=month_start,
                property_id=demo_property.id,
            )
        )

    for title, description, status, priority, todo_type, due_in_days in DEMO_TODOS:
        session.add(
            Todo(
                title=title,
                description=description,
                status=status,
                priority=priority,
                type=todo_type,
                due_date=today + dt.timedelta(days=due_in_days),
                property_id=demo_property.id,
            )
        )

    await session.commit()
    logger.info("Seeded demo property %s with transactions and todos", demo_property.id)
