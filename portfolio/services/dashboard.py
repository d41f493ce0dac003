from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from decimal import Decimal

from portfolio.services.filters import active_repairs_filter
from portfolio.services.reporting import load_year_summary, select_current_bucket
from portfolio.services.stores import PropertyStore, RepairStore, TransactionStore

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DashboardMetrics:
    total_properties: int
    total_value: Decimal
    monthly_income: Decimal
    active_repairs: int


async def assemble_dashboard_metrics(
    properties: PropertyStore,
    transactions: TransactionStore,
    repairs: RepairStore,
    today: dt.date | None = None,
) -> DashboardMetrics:
    # Any store failure propagates: the dashboard is all or nothing.
    today = today or dt.date.today()

    valuations = await properties.find_all()
    total_value = sum((item.market_value for item in valuations), Decimal("0"))

    summary = await load_year_summary(transactions, today.year)
    bucket = select_current_bucket(summary, today)
    if summary.fell_back:
        logger.info(
            "Dashboard income taken from %s-%02d instead of the current month",
            summary.target_year,
            bucket.month,
        )

    active_repairs = await repairs.count(active_repairs_filter())

    return DashboardMetrics(
        total_properties=len(valuations),
        total_value=total_value,
        monthly_income=bucket.income,
        active_repairs=active_repairs,
    )
