import datetime as dt

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from portfolio.db.session import get_session
from portfolio.models.transaction import Transaction
from portfolio.schemas.transaction import TransactionCreate, TransactionRead
from portfolio.services.filters import build_transaction_filter, transaction_conditions
from portfolio.services.records import require_property

router = APIRouter(prefix="/api", tags=["transactions"])


@router.get("/transactions", response_model=list[TransactionRead])
async def list_transactions(
    property_id: int | None = Query(default=None, alias="propertyId", ge=1),
    from_date: dt.date | None = Query(default=None, alias="from"),
    to_date: dt.date | None = Query(default=None, alias="to"),
    month: str | None = Query(default=None, description="Month in YYYY-MM format"),
    limit: int | None = Query(default=None, ge=1, le=500),
    session: AsyncSession = Depends(get_session),
) -> list[TransactionRead]:
    try:
        transaction_filter = build_transaction_filter(property_id, from_date, to_date, month)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc

    query = (
        select(Transaction)
        .options(selectinload(Transaction.property))
        .where(*transaction_conditions(transaction_filter))
        .order_by(Transaction.tx_date.desc(), Transaction.id.desc())
    )
    if limit is not None:
        query = query.limit(limit)

    rows = await session.scalars(query)
    return [TransactionRead.model_validate(item) for item in rows.all()]


@router.post("/transactions", response_model=TransactionRead, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    payload: TransactionCreate,
    session: AsyncSession = Depends(get_session),
) -> TransactionRead:
    try:
        await require_property(session, payload.property_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    transaction = Transaction(
        description=payload.description,
        amount=payload.amount,
        type=payload.type,
        category=payload.category,
        tx_date=payload.date,
        property_id=payload.property_id,
    )
    session.add(transaction)
    await session.commit()

    saved_transaction = await session.scalar(
        select(Transaction)
        .options(selectinload(Transaction.property))
        .where(Transaction.id == transaction.id)
    )
    if saved_transaction is None:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Transaction not found")

    return TransactionRead.model_validate(saved_transaction)


@router.delete("/transactions/{transaction_id}")
async def delete_transaction(
    transaction_id: int,
    session: AsyncSession = Depends(get_session),
) -> dict[str, str]:
    transaction = await session.get(Transaction, transaction_id)
    if transaction is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Transaction not found")

    await session.delete(transaction)
    await session.commit()
    return {"status": "ok"}
