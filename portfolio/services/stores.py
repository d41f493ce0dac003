"""Read-side store interfaces used by the dashboard services.

Each store is a narrow protocol so the aggregation code can be exercised
against in-memory fakes; the ``Sql*`` classes are the production adapters
and are built per request from the session dependency.
"""
from __future__ import annotations

import datetime as dt
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol

from fastapi import Depends
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.db.session import get_session
from portfolio.models.property import Property
from portfolio.models.repair import Repair
from portfolio.models.transaction import Transaction
from portfolio.services.filters import RepairFilter, repair_conditions
from portfolio.services.reporting import LedgerEntry


@dataclass(slots=True, frozen=True)
class PropertyValuation:
    id: int
    market_value: Decimal


class TransactionStore(Protocol):
    async def find_by_date_range(self, start: dt.date, end: dt.date) -> Sequence[LedgerEntry]: ...

    async def find_most_recent(self) -> LedgerEntry | None: ...


class PropertyStore(Protocol):
    async def find_all(self) -> Sequence[PropertyValuation]: ...


class RepairStore(Protocol):
    async def count(self, repair_filter: RepairFilter) -> int: ...


class SqlTransactionStore:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_date_range(self, start: dt.date, end: dt.date) -> list[LedgerEntry]:
        rows = await self.session.execute(
            select(Transaction.tx_date, Transaction.amount, Transaction.type)
            .where(Transaction.tx_date >= start, Transaction.tx_date <= end)
            .order_by(Transaction.tx_date.asc(), Transaction.id.asc())
        )
        return [LedgerEntry(tx_date=tx_date, amount=amount, type=tx_type) for tx_date, amount, tx_type in rows.all()]

    async def find_most_recent(self) -> LedgerEntry | None:
        row = (
            await self.session.execute(
                select(Transaction.tx_date, Transaction.amount, Transaction.type)
                .order_by(Transaction.tx_date.desc(), Transaction.id.desc())
                .limit(1)
            )
        ).first()
        if row is None:
            return None
        tx_date, amount, tx_type = row
        return LedgerEntry(tx_date=tx_date, amount=amount, type=tx_type)


class SqlPropertyStore:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_all(self) -> list[PropertyValuation]:
        rows = await self.session.execute(
            select(Property.id, Property.market_value).order_by(Property.id.asc())
        )
        return [PropertyValuation(id=property_id, market_value=value) for property_id, value in rows.all()]


class SqlRepairStore:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def count(self, repair_filter: RepairFilter) -> int:
        total = await self.session.scalar(
            select(func.count(Repair.id)).where(*repair_conditions(repair_filter))
        )
        return total or 0


def get_transaction_store(session: AsyncSession = Depends(get_session)) -> TransactionStore:
    return SqlTransactionStore(session)


def get_property_store(session: AsyncSession = Depends(get_session)) -> PropertyStore:
    return SqlPropertyStore(session)


def get_repair_store(session: AsyncSession = Depends(get_session)) -> RepairStore:
    return SqlRepairStore(session)
