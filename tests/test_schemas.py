import datetime as dt
from decimal import Decimal

import pytest
from pydantic import ValidationError

from portfolio.models.enums import TransactionType
from portfolio.schemas.calendar import CalendarEventCreate
from portfolio.schemas.tenant import TenantCreate
from portfolio.schemas.transaction import TransactionCreate


def test_transaction_type_accepts_any_casing() -> None:
    payload = TransactionCreate.model_validate(
        {
            "description": " Rent ",
            "amount": "1200",
            "type": "INCOME",
            "category": "RENT",
            "date": "2024-02-01",
            "propertyId": 1,
        }
    )

    assert payload.type == TransactionType.INCOME
    assert payload.description == "Rent"
    assert payload.amount == Decimal("1200")


def test_transaction_amount_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        TransactionCreate(
            description="Plumber",
            amount=Decimal("-10"),
            type=TransactionType.EXPENSE,
            category="REPAIR",
            date=dt.date(2024, 2, 1),
            property_id=1,
        )


def test_tenant_lease_window_and_blank_contact() -> None:
    tenant = TenantCreate.model_validate(
        {
            "name": "Jane",
            "email": "  ",
            "leaseStart": "2024-01-01",
            "leaseEnd": "2024-12-31",
            "rentAmount": "1500",
            "propertyId": 2,
        }
    )
    assert tenant.email is None

    with pytest.raises(ValidationError, match="Lease end must not be before lease start"):
        TenantCreate(
            name="Jane",
            lease_start=dt.date(2024, 12, 31),
            lease_end=dt.date(2024, 1, 1),
            rent_amount=Decimal("1500"),
            property_id=2,
        )


def test_calendar_event_naive_end_is_read_as_utc() -> None:
    event = CalendarEventCreate.model_validate(
        {"start": "2025-03-01T10:00:00Z", "end": "2025-03-01T12:00:00", "type": "TAX", "propertyId": 1, "title": "Tax"}
    )

    assert event.end == dt.datetime(2025, 3, 1, 12, tzinfo=dt.timezone.utc)


def test_calendar_event_mixed_offsets_still_check_window() -> None:
    with pytest.raises(ValidationError, match="End must not be before start"):
        CalendarEventCreate.model_validate(
            {"start": "2025-03-01T10:00:00+00:00", "end": "2025-03-01T09:00:00", "type": "TAX", "propertyId": 1, "title": "Tax"}
        )
