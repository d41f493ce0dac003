import datetime as dt

from pydantic import Field, field_validator, model_validator

from portfolio.models.enums import CalendarEventType, WorkItemPriority
from portfolio.schemas.base import ApiModel, ApiReadModel
from portfolio.schemas.property import PropertySummary
from portfolio.schemas.todo import TodoRead
from portfolio.services.month import as_aware


class CalendarEventCreate(ApiModel):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    start: dt.datetime
    end: dt.datetime | None = None
    all_day: bool = False
    type: CalendarEventType
    property_id: int = Field(ge=1)
    create_todo: bool = False
    todo_priority: WorkItemPriority | None = None
    todo_status: str | None = Field(default=None, pattern="^(OPEN|IN_PROGRESS|COMPLETED)$")

    @field_validator("start", "end")
    @classmethod
    def assume_utc(cls, value: dt.datetime | None) -> dt.datetime | None:
        return as_aware(value) if value is not None else None

    @model_validator(mode="after")
    def check_window(self) -> "CalendarEventCreate":
        if self.end is not None and self.end < self.start:
            raise ValueError("End must not be before start")
        return self


class CalendarEventUpdate(ApiModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    start: dt.datetime | None = None
    end: dt.datetime | None = None
    all_day: bool | None = None
    type: CalendarEventType | None = None
    property_id: int | None = Field(default=None, ge=1)

    @field_validator("start", "end")
    @classmethod
    def assume_utc(cls, value: dt.datetime | None) -> dt.datetime | None:
        return as_aware(value) if value is not None else None


class CalendarEventRead(ApiReadModel):
    id: int
    title: str
    description: str | None
    start: dt.datetime
    end: dt.datetime | None
    all_day: bool
    type: CalendarEventType
    property_id: int
    property: PropertySummary | None = None
    created_at: dt.datetime
    updated_at: dt.datetime


class CalendarEventCreated(ApiModel):
    event: CalendarEventRead
    todo: TodoRead | None = None
