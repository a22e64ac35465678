import structlog
from backend_common.fastapi_app import create_service_app
from fastapi.responses import JSONResponse
from sqlalchemy.exc import InterfaceError, OperationalError

from .database import AsyncSessionLocal
from .exceptions import CoachException, StoreUnavailableException
from .logging_config import configure_logging
from .redis_client import close_redis, init_redis
from .routers.exercises import router as exercises_router
from .routers.stats import router as stats_router
from .routers.users import router as users_router
from .routers.week_plans import router as week_plans_router
from .routers.workouts import router as workouts_router
from .services.exercise_service import ensure_default_exercises

configure_logging()
logger = structlog.get_logger(__name__)

app = create_service_app(
    title="coach-api",
    version="0.1.0",
    description="Workouts, week plans and streaks for the coach Telegram Mini App",
)


@app.exception_handler(CoachException)
async def coach_exception_handler(request, exc: CoachException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "code": exc.code},
    )


@app.exception_handler(OperationalError)
@app.exception_handler(InterfaceError)
async def store_unavailable_handler(request, exc):
    logger.error("store_unavailable", path=request.url.path, error=str(exc))
    unavailable = StoreUnavailableException()
    return JSONResponse(
        status_code=unavailable.status_code,
        content={"detail": unavailable.detail, "code": unavailable.code},
    )


@app.get("/api/health")
async def health():
    return {"status": "ok"}


@app.on_event("startup")
async def startup_event():
    await init_redis()
    try:
        async with AsyncSessionLocal() as db:
            await ensure_default_exercises(db)
    except (OperationalError, InterfaceError) as exc:
        logger.error("default_exercises_seed_failed", error=str(exc))


@app.on_event("shutdown")
async def shutdown_event():
    await close_redis()


app.include_router(users_router, prefix="/api")
app.include_router(exercises_router, prefix="/api")
app.include_router(week_plans_router, prefix="/api")
app.include_router(workouts_router, prefix="/api")
app.include_router(stats_router, prefix="/api")

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
