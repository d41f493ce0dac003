from portfolio.schemas.work_item import WorkItemCreate, WorkItemRead, WorkItemUpdate


class IssueCreate(WorkItemCreate):
    pass


class IssueUpdate(WorkItemUpdate):
    pass


class IssueRead(WorkItemRead):
    pass
