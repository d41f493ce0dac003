import datetime as dt
from decimal import Decimal

from pydantic import Field, field_validator

from portfolio.schemas.base import ApiModel, ApiReadModel, Money


class PropertyCreate(ApiModel):
    address: str = Field(min_length=1, max_length=255)
    city: str = Field(default="", max_length=100)
    state: str = Field(min_length=1, max_length=64)
    zip_code: str = Field(default="", max_length=20)
    type: str = Field(min_length=1, max_length=64)
    market_value: Decimal = Field(ge=0)
    purchase_price: Decimal | None = Field(default=None, ge=0)
    purchase_date: dt.date | None = None
    description: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)

    @field_validator("address", "state", "type")
    @classmethod
    def require_text(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("Value cannot be blank")
        return normalized


class PropertyUpdate(ApiModel):
    address: str | None = Field(default=None, min_length=1, max_length=255)
    city: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, min_length=1, max_length=64)
    zip_code: str | None = Field(default=None, max_length=20)
    type: str | None = Field(default=None, min_length=1, max_length=64)
    market_value: Decimal | None = Field(default=None, ge=0)
    purchase_price: Decimal | None = Field(default=None, ge=0)
    purchase_date: dt.date | None = None
    description: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)


class PropertyRead(ApiReadModel):
    id: int
    address: str
    city: str
    state: str
    zip_code: str
    type: str
    market_value: Money
    purchase_price: Money | None
    purchase_date: dt.date | None
    description: str | None
    latitude: float | None
    longitude: float | None
    created_at: dt.datetime
    updated_at: dt.datetime


class PropertySummary(ApiReadModel):
    id: int
    address: str
    city: str
    state: str
    zip_code: str
