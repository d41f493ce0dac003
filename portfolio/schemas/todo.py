from portfolio.schemas.work_item import WorkItemCreate, WorkItemRead, WorkItemUpdate


class TodoCreate(WorkItemCreate):
    pass


class TodoUpdate(WorkItemUpdate):
    pass


class TodoRead(WorkItemRead):
    calendar_event_id: int | None = None
