from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.models.property import Property
from portfolio.models.repair import Repair
from portfolio.models.tenant import Tenant


async def require_property(session: AsyncSession, property_id: int) -> Property:
    found = await session.get(Property, property_id)
    if found is None:
        raise ValueError("Property not found")
    return found


async def check_references(
    session: AsyncSession,
    property_id: int | None = None,
    repair_id: int | None = None,
    tenant_id: int | None = None,
) -> None:
    if property_id is not None:
        await require_property(session, property_id)
    if repair_id is not None and await session.get(Repair, repair_id) is None:
        raise ValueError("Repair not found")
    if tenant_id is not None and await session.get(Tenant, tenant_id) is None:
        raise ValueError("Tenant not found")
