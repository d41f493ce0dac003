"""Issues and todos share one record shape, so their routers are built from one template."""
import datetime as dt

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from portfolio.db.session import get_session
from portfolio.models.enums import WorkItemPriority, WorkItemStatus, WorkItemType
from portfolio.services.filters import (
    WorkItemModel,
    build_work_item_filter,
    build_work_item_sort,
    work_item_conditions,
    work_item_order_by,
)
from portfolio.services.records import check_references

REQUIRED_WORK_ITEM_FIELDS = ("title", "status", "priority", "type", "property_id")


def build_work_item_router(
    *,
    model: WorkItemModel,
    read_schema: type[BaseModel],
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    resource: str,
    label: str,
) -> APIRouter:
    router = APIRouter(prefix="/api", tags=[resource])
    not_found = f"{label} not found"

    async def load(session: AsyncSession, item_id: int):
        return await session.scalar(
            select(model)
            .options(selectinload(model.property), selectinload(model.repair), selectinload(model.tenant))
            .where(model.id == item_id)
        )

    @router.get(f"/{resource}", response_model=list[read_schema], name=f"list_{resource}")
    async def list_items(
        property_id: int | None = Query(default=None, alias="propertyId", ge=1),
        status_filter: WorkItemStatus | None = Query(default=None, alias="status"),
        priority: WorkItemPriority | None = Query(default=None),
        item_type: WorkItemType | None = Query(default=None, alias="type"),
        due_date_gte: dt.date | None = Query(default=None, alias="dueDateGte"),
        due_date_lte: dt.date | None = Query(default=None, alias="dueDateLte"),
        sort_by: str | None = Query(default=None, alias="sortBy"),
        sort_order: str | None = Query(default=None, alias="sortOrder"),
        session: AsyncSession = Depends(get_session),
    ):
        try:
            item_filter = build_work_item_filter(
                property_id=property_id,
                status=status_filter,
                priority=priority,
                type=item_type,
                due_date_gte=due_date_gte,
                due_date_lte=due_date_lte,
            )
            sort = build_work_item_sort(sort_by, sort_order)
        except ValueError as exc:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc

        rows = await session.scalars(
            select(model)
            .options(selectinload(model.property), selectinload(model.repair), selectinload(model.tenant))
            .where(*work_item_conditions(model, item_filter))
            .order_by(*work_item_order_by(model, sort))
        )
        return [read_schema.model_validate(item) for item in rows.all()]

    @router.post(
        f"/{resource}",
        response_model=read_schema,
        status_code=status.HTTP_201_CREATED,
        name=f"create_{resource}",
    )
    async def create_item(payload: create_schema, session: AsyncSession = Depends(get_session)):
        try:
            await check_references(
                session,
                property_id=payload.property_id,
                repair_id=payload.repair_id,
                tenant_id=payload.tenant_id,
            )
        except ValueError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

        item = model(**payload.model_dump())
        session.add(item)
        await session.commit()

        saved = await load(session, item.id)
        if saved is None:
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=not_found)
        return read_schema.model_validate(saved)

    @router.get(f"/{resource}/{{item_id}}", response_model=read_schema, name=f"get_{resource}")
    async def get_item(item_id: int, session: AsyncSession = Depends(get_session)):
        item = await load(session, item_id)
        if item is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return read_schema.model_validate(item)

    @router.patch(f"/{resource}/{{item_id}}", response_model=read_schema, name=f"update_{resource}")
    async def update_item(item_id: int, payload: update_schema, session: AsyncSession = Depends(get_session)):
        item = await load(session, item_id)
        if item is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)

        changes = payload.model_dump(exclude_unset=True)
        for field_name in REQUIRED_WORK_ITEM_FIELDS:
            if field_name in changes and changes[field_name] is None:
                raise HTTPException(
                    status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                    detail=f"{field_name} cannot be null",
                )
        try:
            await check_references(
                session,
                property_id=changes.get("property_id"),
                repair_id=changes.get("repair_id"),
                tenant_id=changes.get("tenant_id"),
            )
        except ValueError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

        for field_name, value in changes.items():
            setattr(item, field_name, value)
        await session.commit()

        session.expire(item)
        refreshed = await load(session, item_id)
        return read_schema.model_validate(refreshed)

    @router.delete(f"/{resource}/{{item_id}}", name=f"delete_{resource}")
    async def delete_item(item_id: int, session: AsyncSession = Depends(get_session)) -> dict[str, bool]:
        item = await session.get(model, item_id)
        if item is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)

        await session.delete(item)
        await session.commit()
        return {"success": True}

    return router
