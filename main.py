"""Application entry point for the FitTrack API.

Defines the FastAPI app, middleware and exception handlers, and includes the
routers from the `api` package. The `lifespan` handler initializes the DB
on startup.
"""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database import init_db
from database.deps import get_db_read
from core.exceptions import DatabaseError
from core.logger import get_logger
from core.error_handlers import register_exception_handlers
from api.users import router as users_router
from api.bmi import router as bmi_router
from api.activities import router as activities_router
from api.meals import router as meals_router
from api.notifications import router as notifications_router

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Fastapi lifespan context: initialize resources before serving requests."""
    init_db()
    yield


app = FastAPI(title="FitTrack API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log incoming requests and their responses."""
    logger.info("%s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("Request error: %s %s", request.method, request.url.path)
        raise
    logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
    return response


@app.get("/health")
def health(db: Session = Depends(get_db_read)):
    """Return basic health status and database connectivity.

    Raises:
        DatabaseError: If the database cannot be reached.
    """
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.exception("Health check failed")
        raise DatabaseError("Database health check failed", operation="health_check") from exc
    return {"status": "healthy", "database": "connected"}


app.include_router(users_router)
app.include_router(bmi_router)
app.include_router(activities_router)
app.include_router(meals_router)
app.include_router(notifications_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=int(os.getenv("PORT", "8000")), reload=True)
