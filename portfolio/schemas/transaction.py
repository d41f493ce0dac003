import datetime as dt
from decimal import Decimal

from pydantic import Field, field_validator

from portfolio.models.enums import TransactionType
from portfolio.schemas.base import ApiModel, ApiReadModel, Money


class TransactionCreate(ApiModel):
    description: str = Field(min_length=1, max_length=255)
    amount: Decimal = Field(gt=0)
    type: TransactionType
    category: str = Field(min_length=1, max_length=64)
    date: dt.date
    property_id: int = Field(ge=1)

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, value: object) -> object:
        # Upstream clients send both INCOME and income.
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("description", "category")
    @classmethod
    def strip_text(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("Value cannot be blank")
        return normalized


class TransactionPropertyRead(ApiReadModel):
    id: int
    address: str


class TransactionRead(ApiReadModel):
    id: int
    description: str
    amount: Money
    type: TransactionType
    category: str
    date: dt.date = Field(validation_alias="tx_date")
    property_id: int
    property: TransactionPropertyRead | None = None
    created_at: dt.datetime
