from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from portfolio.db.session import get_session
from portfolio.models.tenant import Tenant
from portfolio.schemas.tenant import TenantCreate, TenantRead, TenantUpdate
from portfolio.services.records import require_property

router = APIRouter(prefix="/api", tags=["tenants"])


async def _load_tenant(session: AsyncSession, tenant_id: int) -> Tenant:
    tenant = await session.scalar(
        select(Tenant).options(selectinload(Tenant.property)).where(Tenant.id == tenant_id)
    )
    if tenant is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tenant not found")
    return tenant


@router.get("/tenants", response_model=list[TenantRead])
async def list_tenants(session: AsyncSession = Depends(get_session)) -> list[TenantRead]:
    rows = await session.scalars(
        select(Tenant).options(selectinload(Tenant.property)).order_by(Tenant.created_at.desc(), Tenant.id.desc())
    )
    return [TenantRead.model_validate(item) for item in rows.all()]


@router.post("/tenants", response_model=TenantRead, status_code=status.HTTP_201_CREATED)
async def create_tenant(payload: TenantCreate, session: AsyncSession = Depends(get_session)) -> TenantRead:
    try:
        await require_property(session, payload.property_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    tenant = Tenant(**payload.model_dump())
    session.add(tenant)
    await session.commit()
    return TenantRead.model_validate(await _load_tenant(session, tenant.id))


@router.get("/tenants/{tenant_id}", response_model=TenantRead)
async def get_tenant(tenant_id: int, session: AsyncSession = Depends(get_session)) -> TenantRead:
    return TenantRead.model_validate(await _load_tenant(session, tenant_id))


@router.patch("/tenants/{tenant_id}", response_model=TenantRead)
async def update_tenant(
    tenant_id: int,
    payload: TenantUpdate,
    session: AsyncSession = Depends(get_session),
) -> TenantRead:
    tenant = await _load_tenant(session, tenant_id)
    changes = payload.model_dump(exclude_unset=True)

    if changes.get("property_id") is not None:
        try:
            await require_property(session, changes["property_id"])
        except ValueError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    for field_name in ("name", "lease_start", "lease_end", "rent_amount", "property_id"):
        if field_name in changes and changes[field_name] is None:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"{field_name} cannot be null",
            )

    lease_start = changes.get("lease_start", tenant.lease_start)
    lease_end = changes.get("lease_end", tenant.lease_end)
    if lease_end < lease_start:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Lease end must not be before lease start",
        )

    for field_name, value in changes.items():
        setattr(tenant, field_name, value)

    await session.commit()
    session.expire(tenant)
    return TenantRead.model_validate(await _load_tenant(session, tenant_id))


@router.delete("/tenants/{tenant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tenant(tenant_id: int, session: AsyncSession = Depends(get_session)) -> Response:
    tenant = await session.get(Tenant, tenant_id)
    if tenant is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tenant not found")

    await session.delete(tenant)
    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
