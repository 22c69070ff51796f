# File: domain_registry/ingest/importer.py
import logging
from datetime import datetime
from typing import Callable, List

from sqlalchemy.orm import Session

from domain_registry.crud import domain_crud
from domain_registry.ingest.tasks import TaskRegistry
from domain_registry.schemas.domain import DomainRecord

logger = logging.getLogger("uvicorn")


class DomainImporter:
    """Writes parsed records into the domain table, reporting progress on a task."""

    def __init__(self, session_factory: Callable[[], Session], registry: TaskRegistry):
        self.session_factory = session_factory
        self.registry = registry

    def run(self, task_id: str, records: List[DomainRecord]) -> dict:
        start_time = datetime.now()
        created = 0
        updated = 0
        logger.info(f"📦 Importing {len(records):,} domain rows (task {task_id})")

        with self.session_factory() as db:
            for record in records:
                try:
                    _, is_new = domain_crud.upsert_record(db, record)
                except Exception as e:
                    logger.error(f"❌ Import task {task_id} failed on '{record.domain_name}': {e}")
                    # the task is readable without a token; SQL text stays in the log
                    self.registry.fail(task_id, f"{record.domain_name}: {type(e).__name__}")
                    return {"created": created, "updated": updated, "error": type(e).__name__}

                if is_new:
                    created += 1
                else:
                    updated += 1
                self.registry.advance(task_id)

        elapsed = (datetime.now() - start_time).total_seconds()
        logger.info(f"✅ Import task {task_id} done in {elapsed:.2f}s: {created:,} new, {updated:,} updated")
        return {"created": created, "updated": updated}
