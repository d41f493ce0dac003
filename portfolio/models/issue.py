import datetime as dt

from sqlalchemy import Date, DateTime, ForeignKey, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portfolio.db.base import Base
from portfolio.models.enums import (
    WorkItemPriority,
    WorkItemStatus,
    WorkItemType,
    work_item_priority_enum,
    work_item_status_enum,
    work_item_type_enum,
)


class Issue(Base):
    __tablename__ = "issues"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    due_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    status: Mapped[WorkItemStatus] = mapped_column(
        work_item_status_enum,
        nullable=False,
        default=WorkItemStatus.OPEN,
        server_default=WorkItemStatus.OPEN.value,
    )
    priority: Mapped[WorkItemPriority] = mapped_column(
        work_item_priority_enum,
        nullable=False,
        default=WorkItemPriority.MEDIUM,
        server_default=WorkItemPriority.MEDIUM.value,
    )
    type: Mapped[WorkItemType] = mapped_column(work_item_type_enum, nullable=False)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )
    property_id: Mapped[int] = mapped_column(ForeignKey("properties.id", ondelete="CASCADE"), nullable=False)
    repair_id: Mapped[int | None] = mapped_column(ForeignKey("repairs.id", ondelete="SET NULL"), nullable=True)
    tenant_id: Mapped[int | None] = mapped_column(ForeignKey("tenants.id", ondelete="SET NULL"), nullable=True)

    property = relationship("Property", back_populates="issues")
    repair = relationship("Repair", back_populates="issues")
    tenant = relationship("Tenant", back_populates="issues")
