import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from domain_registry.core import database
from domain_registry.core.config import settings
from domain_registry.core.exceptions import register_exception_handlers
from domain_registry.core.middleware import BodySizeLimitMiddleware
from domain_registry.api.api import api_router
from domain_registry.ingest.tasks import task_registry
from domain_registry.initialization import ApplicationInitializer

VERSION = "0.1.0"

# Initialize logger for uvicorn
uvicorn_logger = logging.getLogger("uvicorn")
uvicorn_logger.setLevel(settings.LOG_LEVEL.upper())

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""

    initializer = ApplicationInitializer(task_registry)

    try:
        uvicorn_logger.info("🚀 Starting Domain Registry API initialization...")

        with database.SessionLocal() as db:
            uvicorn_logger.info("📊 Initializing database...")
            db_status = initializer.initialize_database(db)
            if not db_status["schema_ready"]:
                uvicorn_logger.warning("⚠️ Database initialization incomplete")
            if not db_status["upload_dir_ready"]:
                uvicorn_logger.warning("⚠️ Uploads will fail until the upload directory is writable")
            if db_status["error"]:
                uvicorn_logger.error(f"❌ Error: {db_status['error']}")

        app.state.initializer = initializer
        uvicorn_logger.info("🎉 Domain Registry API initialization completed!")

        yield

    except Exception as e:
        uvicorn_logger.exception(f"🔥 Startup error: {e}")
        raise

# FastAPI app setup
app = FastAPI(
    title="Domain Registry API",
    description="Domain-name inventory with WHOIS and ICP filing metadata, spreadsheet import and user accounts",
    version=VERSION,
    lifespan=lifespan
)

register_exception_handlers(app)

# CORS Middleware Setup
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(BodySizeLimitMiddleware)

# API Router Setup
app.include_router(api_router, prefix="/api")

@app.get("/")
def read_root():
    """Root endpoint with API information."""
    return {
        "message": "Domain Registry API is running!",
        "version": VERSION,
        "docs": "/docs",
        "health": "/health"
    }

@app.get("/health")
def health_check():
    """Health check with schema and task status."""
    initializer = getattr(app.state, "initializer", None) or ApplicationInitializer(task_registry)
    with database.SessionLocal() as db:
        summary = initializer.get_initialization_summary(db)

    if "error" in summary:
        return {"status": "error", "error": summary["error"], "version": VERSION}

    return {
        "status": "healthy" if summary["database"]["initialized"] else "degraded",
        "version": VERSION,
        "components": summary,
    }

def run():
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)

if __name__ == "__main__":
    run()
