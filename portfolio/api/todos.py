from portfolio.api.work_items import build_work_item_router
from portfolio.models.todo import Todo
from portfolio.schemas.todo import TodoCreate, TodoRead, TodoUpdate

router = build_work_item_router(
    model=Todo,
    read_schema=TodoRead,
    create_schema=TodoCreate,
    update_schema=TodoUpdate,
    resource="todos",
    label="Todo",
)
