import datetime as dt
from decimal import Decimal

from sqlalchemy import Date, DateTime, ForeignKey, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portfolio.db.base import Base
from portfolio.models.enums import RepairPriority, RepairStatus, repair_priority_enum, repair_status_enum


class Repair(Base):
    __tablename__ = "repairs"

    id: Mapped[int] = mapped_column(primary_key=True)
    item: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    cost: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    status: Mapped[RepairStatus] = mapped_column(
        repair_status_enum,
        nullable=False,
        default=RepairStatus.PENDING,
        server_default=RepairStatus.PENDING.value,
    )
    priority: Mapped[RepairPriority] = mapped_column(
        repair_priority_enum,
        nullable=False,
        default=RepairPriority.MEDIUM,
        server_default=RepairPriority.MEDIUM.value,
    )
    repair_date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    estimated_completion_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    property_id: Mapped[int] = mapped_column(ForeignKey("properties.id", ondelete="CASCADE"), nullable=False)

    property = relationship("Property", back_populates="repairs")
    issues = relationship("Issue", back_populates="repair", passive_deletes=True)
    todos = relationship("Todo", back_populates="repair", passive_deletes=True)
