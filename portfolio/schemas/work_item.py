"""Shared payloads for issues and todos, which carry the same fields."""
import datetime as dt

from pydantic import Field, field_validator

from portfolio.models.enums import WorkItemPriority, WorkItemStatus, WorkItemType
from portfolio.schemas.base import ApiModel, ApiReadModel


class WorkItemCreate(ApiModel):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    due_date: dt.date | None = None
    status: WorkItemStatus = WorkItemStatus.OPEN
    priority: WorkItemPriority = WorkItemPriority.MEDIUM
    type: WorkItemType
    property_id: int = Field(ge=1)
    repair_id: int | None = Field(default=None, ge=1)
    tenant_id: int | None = Field(default=None, ge=1)

    @field_validator("title")
    @classmethod
    def strip_title(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("Title is required")
        return normalized


class WorkItemUpdate(ApiModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    due_date: dt.date | None = None
    status: WorkItemStatus | None = None
    priority: WorkItemPriority | None = None
    type: WorkItemType | None = None
    property_id: int | None = Field(default=None, ge=1)
    repair_id: int | None = Field(default=None, ge=1)
    tenant_id: int | None = Field(default=None, ge=1)


class WorkItemPropertyRead(ApiReadModel):
    id: int
    address: str


class WorkItemRepairRead(ApiReadModel):
    id: int
    description: str


class WorkItemTenantRead(ApiReadModel):
    id: int
    name: str


class WorkItemRead(ApiReadModel):
    id: int
    title: str
    description: str | None
    due_date: dt.date | None
    status: WorkItemStatus
    priority: WorkItemPriority
    type: WorkItemType
    property_id: int
    repair_id: int | None
    tenant_id: int | None
    property: WorkItemPropertyRead | None = None
    repair: WorkItemRepairRead | None = None
    tenant: WorkItemTenantRead | None = None
    created_at: dt.datetime
    updated_at: dt.datetime
