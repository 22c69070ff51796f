import logging
from pathlib import Path
from sqlalchemy.orm import Session

from domain_registry.core.schema import create_schema, table_names
from domain_registry.crud import domain_crud
from domain_registry.crud import user as user_crud
from domain_registry.ingest.tasks import TaskRegistry
from settings import UploadFiles

logger = logging.getLogger("uvicorn")

REQUIRED_TABLES = ("user", "domain")


class ApplicationInitializer:
    """Handles application initialization: schema and upload storage."""

    def __init__(self, registry: TaskRegistry | None = None):
        self.registry = registry

    def initialize_database(self, db: Session) -> dict:
        logger.info("🔍 Checking database initialization status...")
        try:
            logger.info("🛠️ Applying CREATE TABLE IF NOT EXISTS statements...")
            create_schema(db.get_bind())

            tables = table_names(db.get_bind())
            schema_ready = all(t in tables for t in REQUIRED_TABLES)
            if schema_ready:
                logger.info("✅ Database schema ready")
            else:
                logger.warning(f"⚠️ Missing tables after schema creation: {tables}")

            status = {
                "tables": tables,
                "schema_ready": schema_ready,
                "users_count": user_crud.count(db),
                "domains_count": domain_crud.count(db),
                "error": None,
            }
            logger.info(f"📊 {status['users_count']:,} users, {status['domains_count']:,} domains stored")

            upload_status = self.initialize_upload_dir()
            status["upload_dir"] = upload_status["upload_dir"]
            status["upload_dir_ready"] = upload_status["upload_dir_ready"]
            status["error"] = upload_status.get("error")
            return status

        except Exception as e:
            logger.error(f"❌ Database initialization failed: {e}")
            return {
                "tables": [],
                "schema_ready": False,
                "users_count": 0,
                "domains_count": 0,
                "upload_dir": str(UploadFiles.UPLOAD_DIR),
                "upload_dir_ready": False,
                "error": str(e)
            }

    def initialize_upload_dir(self) -> dict:
        upload_dir = Path(UploadFiles.UPLOAD_DIR)
        try:
            upload_dir.mkdir(parents=True, exist_ok=True)
            logger.info(f"📁 Upload directory: {upload_dir}")
            return {"upload_dir": str(upload_dir), "upload_dir_ready": True}
        except OSError as e:
            logger.error(f"❌ Cannot create upload directory {upload_dir}: {e}")
            return {"upload_dir": str(upload_dir), "upload_dir_ready": False, "error": str(e)}

    def get_initialization_summary(self, db: Session) -> dict:
        """Get summary of current initialization status."""
        try:
            tables = table_names(db.get_bind())
            schema_ready = all(t in tables for t in REQUIRED_TABLES)
            return {
                "database": {
                    "tables": tables,
                    "initialized": schema_ready,
                    "users": user_crud.count(db) if schema_ready else 0,
                    "domains": domain_crud.count(db) if schema_ready else 0,
                },
                "tasks": {
                    "tracked": len(self.registry) if self.registry is not None else 0,
                },
            }

        except Exception as e:
            logger.error(f"Failed to get initialization summary: {e}")
            return {"error": str(e)}
