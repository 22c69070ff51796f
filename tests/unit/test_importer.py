from __future__ import annotations

from sqlalchemy.orm import Session, sessionmaker

from domain_registry.crud import domain_crud
from domain_registry.ingest.importer import DomainImporter
from domain_registry.ingest.tasks import TaskRegistry, TaskStatus
from domain_registry.schemas.domain import DomainRecord


def test_import_writes_every_record_and_finishes_task(
    session_factory: sessionmaker, db: Session, registry: TaskRegistry
) -> None:
    records = [
        DomainRecord(domain_name="example.com", score=1),
        DomainRecord(domain_name="example.org"),
        DomainRecord(domain_name="example.com", title="dup row enriches"),
    ]
    task_id = registry.create("import domains", len(records))

    result = DomainImporter(session_factory, registry).run(task_id, records)

    assert result == {"created": 2, "updated": 1}
    task = registry.get(task_id)
    assert task.status is TaskStatus.DONE
    assert task.progress == 3
    stored = domain_crud.get_by_name(db, "example.com")
    assert stored.score == 1
    assert stored.title == "dup row enriches"


def test_import_failure_marks_task(
    session_factory: sessionmaker, registry: TaskRegistry, monkeypatch
) -> None:
    calls = []
    real_upsert = domain_crud.upsert_record

    def flaky_upsert(db, record):
        calls.append(record.domain_name)
        if record.domain_name == "broken.com":
            raise RuntimeError("disk full")
        return real_upsert(db, record)

    monkeypatch.setattr(domain_crud, "upsert_record", flaky_upsert)
    records = [
        DomainRecord(domain_name="ok.com"),
        DomainRecord(domain_name="broken.com"),
        DomainRecord(domain_name="never.com"),
    ]
    task_id = registry.create("import domains", len(records))

    result = DomainImporter(session_factory, registry).run(task_id, records)

    assert result["error"] == "RuntimeError"
    assert calls == ["ok.com", "broken.com"]
    task = registry.get(task_id)
    assert task.status is TaskStatus.ERROR
    assert task.progress == 1
    assert task.err_msg == "broken.com: RuntimeError"


def test_import_keeps_going_when_a_row_was_inserted_concurrently(
    session_factory: sessionmaker, db: Session, registry: TaskRegistry, monkeypatch
) -> None:
    domain_crud.create(db, "a.com", title="first")
    real_get_by_name = domain_crud.get_by_name
    misses = []

    def get_by_name(session, domain_name):
        if domain_name == "a.com" and not misses:
            misses.append(domain_name)
            return None
        return real_get_by_name(session, domain_name)

    monkeypatch.setattr(domain_crud, "get_by_name", get_by_name)
    records = [DomainRecord(domain_name="a.com", score=3), DomainRecord(domain_name="b.com")]
    task_id = registry.create("import domains", len(records))

    result = DomainImporter(session_factory, registry).run(task_id, records)

    assert result == {"created": 1, "updated": 1}
    task = registry.get(task_id)
    assert task.status is TaskStatus.DONE
    assert task.progress == 2
    assert domain_crud.get_by_name(db, "a.com").score == 3
    assert domain_crud.get_by_name(db, "b.com") is not None


def test_failed_task_message_does_not_carry_sql(
    session_factory: sessionmaker, registry: TaskRegistry, monkeypatch
) -> None:
    from sqlalchemy.exc import OperationalError

    def failing_upsert(db, record):
        raise OperationalError("SELECT secret FROM domain WHERE x = ?", {"x": 1}, Exception("locked"))

    monkeypatch.setattr(domain_crud, "upsert_record", failing_upsert)
    task_id = registry.create("import domains", 1)

    DomainImporter(session_factory, registry).run(task_id, [DomainRecord(domain_name="a.com")])

    task = registry.get(task_id)
    assert task.err_msg == "a.com: OperationalError"
    assert "SELECT" not in task.err_msg
