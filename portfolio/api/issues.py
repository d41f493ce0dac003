from portfolio.api.work_items import build_work_item_router
from portfolio.models.issue import Issue
from portfolio.schemas.issue import IssueCreate, IssueRead, IssueUpdate

router = build_work_item_router(
    model=Issue,
    read_schema=IssueRead,
    create_schema=IssueCreate,
    update_schema=IssueUpdate,
    resource="issues",
    label="Issue",
)
