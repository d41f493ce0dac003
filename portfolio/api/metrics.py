from fastapi import APIRouter, Depends, Query

from portfolio.schemas.dashboard import YearSummaryRead
from portfolio.services.month import parse_year
from portfolio.services.reporting import load_year_summary
from portfolio.services.stores import TransactionStore, get_transaction_store

router = APIRouter(prefix="/api", tags=["metrics"])


@router.get("/metrics", response_model=YearSummaryRead)
async def year_metrics(
    year: str | None = Query(default=None, description="Calendar year, defaults to the current one"),
    store: TransactionStore = Depends(get_transaction_store),
) -> YearSummaryRead:
    summary = await load_year_summary(store, parse_year(year))
    return YearSummaryRead.model_validate(summary)
