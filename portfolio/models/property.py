import datetime as dt
from decimal import Decimal

from sqlalchemy import Date, DateTime, Float, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portfolio.db.base import Base


class Property(Base):
    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(primary_key=True)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False, default="", server_default="")
    state: Mapped[str] = mapped_column(String(64), nullable=False)
    zip_code: Mapped[str] = mapped_column(String(20), nullable=False, default="", server_default="")
    type: Mapped[str] = mapped_column(String(64), nullable=False)
    market_value: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=Decimal("0"))
    purchase_price: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    purchase_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )

    tenants = relationship("Tenant", back_populates="property", cascade="all, delete-orphan", passive_deletes=True)
    transactions = relationship(
        "Transaction", back_populates="property", cascade="all, delete-orphan", passive_deletes=True
    )
    repairs = relationship("Repair", back_populates="property", cascade="all, delete-orphan", passive_deletes=True)
    issues = relationship("Issue", back_populates="property", cascade="all, delete-orphan", passive_deletes=True)
    todos = relationship("Todo", back_populates="property", cascade="all, delete-orphan", passive_deletes=True)
    calendar_events = relationship(
        "CalendarEvent", back_populates="property", cascade="all, delete-orphan", passive_deletes=True
    )
