from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from portfolio.db.session import get_session
from portfolio.models.enums import RepairStatus
from portfolio.models.repair import Repair
from portfolio.schemas.repair import RepairCreate, RepairRead, RepairUpdate
from portfolio.services.filters import build_repair_filter, repair_conditions
from portfolio.services.records import require_property

router = APIRouter(prefix="/api", tags=["repairs"])

REQUIRED_REPAIR_FIELDS = ("repair_date", "cost", "description", "status", "priority", "item")


async def _load_repair(session: AsyncSession, repair_id: int) -> Repair | None:
    return await session.scalar(
        select(Repair).options(selectinload(Repair.property)).where(Repair.id == repair_id)
    )


@router.get("/repairs", response_model=list[RepairRead])
async def list_repairs(
    property_id: int | None = Query(default=None, alias="propertyId", ge=1),
    status_filter: RepairStatus | None = Query(default=None, alias="status"),
    session: AsyncSession = Depends(get_session),
) -> list[RepairRead]:
    repair_filter = build_repair_filter(property_id=property_id, status=status_filter)
    rows = await session.scalars(
        select(Repair)
        .options(selectinload(Repair.property))
        .where(*repair_conditions(repair_filter))
        .order_by(Repair.repair_date.desc(), Repair.id.desc())
    )
    return [RepairRead.model_validate(item) for item in rows.all()]


@router.post("/repairs", response_model=RepairRead, status_code=status.HTTP_201_CREATED)
async def create_repair(payload: RepairCreate, session: AsyncSession = Depends(get_session)) -> RepairRead:
    try:
        await require_property(session, payload.property_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    values = payload.model_dump()
    values["repair_date"] = values.pop("date")
    repair = Repair(**values)
    session.add(repair)
    await session.commit()

    saved_repair = await _load_repair(session, repair.id)
    if saved_repair is None:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Repair not found")
    return RepairRead.model_validate(saved_repair)


@router.patch("/repairs/{repair_id}", response_model=RepairRead)
async def update_repair(
    repair_id: int,
    payload: RepairUpdate,
    session: AsyncSession = Depends(get_session),
) -> RepairRead:
    repair = await _load_repair(session, repair_id)
    if repair is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Repair not found")

    changes = payload.model_dump(exclude_unset=True)
    if "date" in changes:
        changes["repair_date"] = changes.pop("date")
    if not changes:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="At least one field is required")

    for field_name in REQUIRED_REPAIR_FIELDS:
        if field_name in changes and changes[field_name] is None:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"{field_name} cannot be null",
            )
    for field_name, value in changes.items():
        setattr(repair, field_name, value)

    await session.commit()
    return RepairRead.model_validate(repair)
