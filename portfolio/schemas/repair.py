import datetime as dt
from decimal import Decimal

from pydantic import Field

from portfolio.models.enums import RepairPriority, RepairStatus
from portfolio.schemas.base import ApiModel, ApiReadModel, Money


class RepairCreate(ApiModel):
    date: dt.date
    cost: Decimal = Field(gt=0)
    description: str = Field(min_length=1)
    status: RepairStatus = RepairStatus.PENDING
    priority: RepairPriority = RepairPriority.MEDIUM
    property_id: int = Field(ge=1)
    item: str = Field(min_length=1, max_length=255)
    estimated_completion_date: dt.date | None = None


class RepairUpdate(ApiModel):
    date: dt.date | None = None
    cost: Decimal | None = Field(default=None, gt=0)
    description: str | None = Field(default=None, min_length=1)
    status: RepairStatus | None = None
    priority: RepairPriority | None = None
    item: str | None = Field(default=None, min_length=1, max_length=255)
    estimated_completion_date: dt.date | None = None


class RepairPropertyRead(ApiReadModel):
    address: str


class RepairRead(ApiReadModel):
    id: int
    item: str
    description: str
    cost: Money
    status: RepairStatus
    priority: RepairPriority
    date: dt.date = Field(validation_alias="repair_date")
    estimated_completion_date: dt.date | None
    property_id: int
    property: RepairPropertyRead | None = None
    created_at: dt.datetime
