from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.db.session import get_session
from portfolio.models.property import Property
from portfolio.schemas.property import PropertyCreate, PropertyRead, PropertyUpdate

router = APIRouter(prefix="/api", tags=["properties"])


async def _get_property_or_404(session: AsyncSession, property_id: int) -> Property:
    found = await session.get(Property, property_id)
    if found is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")
    return found


@router.get("/properties", response_model=list[PropertyRead])
async def list_properties(session: AsyncSession = Depends(get_session)) -> list[PropertyRead]:
    rows = await session.scalars(select(Property).order_by(Property.created_at.desc(), Property.id.desc()))
    return [PropertyRead.model_validate(item) for item in rows.all()]


@router.post("/properties", response_model=PropertyRead, status_code=status.HTTP_201_CREATED)
async def create_property(
    payload: PropertyCreate,
    session: AsyncSession = Depends(get_session),
) -> PropertyRead:
    created = Property(**payload.model_dump())
    session.add(created)
    await session.commit()
    await session.refresh(created)
    return PropertyRead.model_validate(created)


@router.get("/properties/{property_id}", response_model=PropertyRead)
async def get_property(property_id: int, session: AsyncSession = Depends(get_session)) -> PropertyRead:
    return PropertyRead.model_validate(await _get_property_or_404(session, property_id))


@router.patch("/properties/{property_id}", response_model=PropertyRead)
async def update_property(
    property_id: int,
    payload: PropertyUpdate,
    session: AsyncSession = Depends(get_session),
) -> PropertyRead:
    existing = await _get_property_or_404(session, property_id)

    changes = payload.model_dump(exclude_unset=True)
    for required in ("address", "state", "type", "market_value"):
        if required in changes and changes[required] is None:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"{required} cannot be null",
            )
    for field_name, value in changes.items():
        setattr(existing, field_name, value)

    await session.commit()
    await session.refresh(existing)
    return PropertyRead.model_validate(existing)


@router.delete("/properties/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_property(property_id: int, session: AsyncSession = Depends(get_session)) -> Response:
    existing = await _get_property_or_404(session, property_id)
    await session.delete(existing)
    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
