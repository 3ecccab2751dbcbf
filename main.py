import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobtracker.config import settings
from jobtracker.database import close_db, engine, init_db
from jobtracker.health import check_database
from jobtracker.routers import jobs

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: create tables on the pooled engine
    logger.info(f"Starting {settings.app_name}")
    await init_db()
    logger.info("Database tables created successfully")
    yield
    # Shutdown: Close connections
    logger.info(f"Shutting down {settings.app_name}")
    await close_db()
    logger.info("Database connections closed")

app = FastAPI(
    title=settings.app_name,
    description="Track job applications and see how the search is going",
    version="0.1.0",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_cors_origin],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(jobs.router)


@app.get("/")
async def root():
    return {"message": f"{settings.app_name} - Ready"}


@app.get("/health")
async def health_check():
    """Report database connectivity."""
    database_health = await check_database(engine)

    return {
        "status": "healthy" if database_health.status == "connected" else "degraded",
        "dependencies": {
            "database": database_health.status,
        },
        "metrics": {
            "database_latency_ms": database_health.latency_ms,
        },
    }
