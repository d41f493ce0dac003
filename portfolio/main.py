import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from portfolio.api.calendar import router as calendar_router
from portfolio.api.dashboard import router as dashboard_router
from portfolio.api.issues import router as issues_router
from portfolio.api.metrics import router as metrics_router
from portfolio.api.properties import router as properties_router
from portfolio.api.repairs import router as repairs_router
from portfolio.api.tenants import router as tenants_router
from portfolio.api.todos import router as todos_router
from portfolio.api.transactions import router as transactions_router
from portfolio.db.base import Base
from portfolio.db.seed import seed_demo_data
from portfolio.db.session import AsyncSessionLocal, engine
from portfolio.db.settings import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, version="0.1.0")


@app.on_event("startup")
async def on_startup() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if settings.create_tables:
        async with engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    if settings.seed_demo:
        async with AsyncSessionLocal() as session:
            await seed_demo_data(session)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Database error"})


@app.get("/health", tags=["health"])
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(metrics_router)
app.include_router(dashboard_router)
app.include_router(properties_router)
app.include_router(tenants_router)
app.include_router(transactions_router)
app.include_router(repairs_router)
app.include_router(issues_router)
app.include_router(todos_router)
app.include_router(calendar_router)
