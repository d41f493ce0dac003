import datetime as dt
from decimal import Decimal

from pydantic import EmailStr, Field, field_validator, model_validator

from portfolio.schemas.base import ApiModel, ApiReadModel, Money
from portfolio.schemas.property import PropertySummary


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


class TenantCreate(ApiModel):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=64)
    lease_start: dt.date
    lease_end: dt.date
    rent_amount: Decimal = Field(gt=0)
    property_id: int = Field(ge=1)

    @field_validator("email", "phone", mode="before")
    @classmethod
    def empty_as_missing(cls, value: str | None) -> str | None:
        return _blank_to_none(value)

    @model_validator(mode="after")
    def check_lease_window(self) -> "TenantCreate":
        if self.lease_end < self.lease_start:
            raise ValueError("Lease end must not be before lease start")
        return self


class TenantUpdate(ApiModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=64)
    lease_start: dt.date | None = None
    lease_end: dt.date | None = None
    rent_amount: Decimal | None = Field(default=None, gt=0)
    property_id: int | None = Field(default=None, ge=1)

    @field_validator("email", "phone", mode="before")
    @classmethod
    def empty_as_missing(cls, value: str | None) -> str | None:
        return _blank_to_none(value)


class TenantRead(ApiReadModel):
    id: int
    name: str
    email: str | None
    phone: str | None
    lease_start: dt.date
    lease_end: dt.date
    rent_amount: Money
    property_id: int
    property: PropertySummary | None = None
    created_at: dt.datetime
    updated_at: dt.datetime
