import datetime as dt
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from portfolio.db.session import get_session
from portfolio.models.calendar_event import CalendarEvent
from portfolio.models.enums import CalendarEventType
from portfolio.models.todo import Todo
from portfolio.schemas.calendar import CalendarEventCreate, CalendarEventCreated, CalendarEventRead, CalendarEventUpdate
from portfolio.schemas.todo import TodoRead
from portfolio.services.calendar_todos import draft_todo_for_event
from portfolio.services.filters import build_calendar_filter, calendar_conditions
from portfolio.services.month import as_aware
from portfolio.services.records import require_property

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["calendar"])

REQUIRED_EVENT_FIELDS = ("title", "start", "all_day", "type", "property_id")


async def _load_event(session: AsyncSession, event_id: int) -> CalendarEvent | None:
    return await session.scalar(
        select(CalendarEvent).options(selectinload(CalendarEvent.property)).where(CalendarEvent.id == event_id)
    )


@router.get("/calendar", response_model=list[CalendarEventRead])
async def list_events(
    start: dt.datetime | None = Query(default=None),
    end: dt.datetime | None = Query(default=None),
    property_id: int | None = Query(default=None, alias="propertyId", ge=1),
    event_type: CalendarEventType | None = Query(default=None, alias="type"),
    session: AsyncSession = Depends(get_session),
) -> list[CalendarEventRead]:
    try:
        event_filter = build_calendar_filter(start=start, end=end, property_id=property_id, type=event_type)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc

    rows = await session.scalars(
        select(CalendarEvent)
        .options(selectinload(CalendarEvent.property))
        .where(*calendar_conditions(event_filter))
        .order_by(CalendarEvent.start.asc(), CalendarEvent.id.asc())
    )
    return [CalendarEventRead.model_validate(item) for item in rows.all()]


@router.post("/calendar", response_model=CalendarEventCreated, status_code=status.HTTP_201_CREATED)
async def create_event(
    payload: CalendarEventCreate,
    session: AsyncSession = Depends(get_session),
) -> CalendarEventCreated:
    try:
        await require_property(session, payload.property_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    event = CalendarEvent(
        title=payload.title,
        description=payload.description,
        start=payload.start,
        end=payload.end,
        all_day=payload.all_day,
        type=payload.type,
        property_id=payload.property_id,
    )
    session.add(event)

    todo: Todo | None = None
    if payload.create_todo:
        draft = draft_todo_for_event(
            title=payload.title,
            description=payload.description,
            event_type=payload.type,
            start=payload.start,
            end=payload.end,
            property_id=payload.property_id,
            status=payload.todo_status,
            priority=payload.todo_priority,
        )
        await session.flush()
        todo = Todo(
            title=draft.title,
            description=draft.description,
            status=draft.status,
            priority=draft.priority,
            type=draft.type,
            due_date=draft.due_date,
            property_id=draft.property_id,
            calendar_event_id=event.id,
        )
        session.add(todo)

    # Event and linked todo are committed together.
    await session.commit()

    saved_event = await _load_event(session, event.id)
    if saved_event is None:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Calendar event not found")

    todo_read = None
    if todo is not None:
        logger.info("Created todo %s for calendar event %s", todo.id, event.id)
        saved_todo = await session.scalar(
            select(Todo)
            .options(selectinload(Todo.property), selectinload(Todo.repair), selectinload(Todo.tenant))
            .where(Todo.id == todo.id)
        )
        todo_read = TodoRead.model_validate(saved_todo)

    return CalendarEventCreated(event=CalendarEventRead.model_validate(saved_event), todo=todo_read)


@router.get("/calendar/{event_id}", response_model=CalendarEventRead)
async def get_event(event_id: int, session: AsyncSession = Depends(get_session)) -> CalendarEventRead:
    event = await _load_event(session, event_id)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Calendar event not found")
    return CalendarEventRead.model_validate(event)


@router.patch("/calendar/{event_id}", response_model=CalendarEventRead)
async def update_event(
    event_id: int,
    payload: CalendarEventUpdate,
    session: AsyncSession = Depends(get_session),
) -> CalendarEventRead:
    event = await _load_event(session, event_id)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Calendar event not found")

    changes = payload.model_dump(exclude_unset=True)
    for field_name in REQUIRED_EVENT_FIELDS:
        if field_name in changes and changes[field_name] is None:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"{field_name} cannot be null",
            )
    if changes.get("property_id") is not None:
        try:
            await require_property(session, changes["property_id"])
        except ValueError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    start = changes.get("start", event.start)
    end = changes.get("end", event.end)
    if end is not None and as_aware(end) < as_aware(start):
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="End must not be before start")

    for field_name, value in changes.items():
        setattr(event, field_name, value)
    await session.commit()

    session.expire(event)
    return CalendarEventRead.model_validate(await _load_event(session, event_id))


@router.delete("/calendar/{event_id}")
async def delete_event(event_id: int, session: AsyncSession = Depends(get_session)) -> dict[str, bool]:
    event = await session.get(CalendarEvent, event_id)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Calendar event not found")

    await session.delete(event)
    await session.commit()
    return {"success": True}
