from __future__ import annotations

from pathlib import Path

from sqlalchemy.orm import Session

from domain_registry.initialization import ApplicationInitializer


def test_initialize_database_prepares_schema_and_upload_dir(db: Session, upload_dir: Path) -> None:
    status = ApplicationInitializer().initialize_database(db)

    assert status["schema_ready"] is True
    assert set(status["tables"]) >= {"user", "domain"}
    assert status["users_count"] == 0
    assert status["domains_count"] == 0
    assert status["upload_dir_ready"] is True
    assert status["error"] is None
    assert upload_dir.is_dir()


def test_initialize_database_reports_upload_dir_failure(db: Session, tmp_path: Path, monkeypatch) -> None:
    from settings import UploadFiles

    blocker = tmp_path / "not-a-dir"
    blocker.write_text("file in the way")
    monkeypatch.setattr(UploadFiles, "UPLOAD_DIR", blocker / "upload")

    status = ApplicationInitializer().initialize_database(db)

    assert status["schema_ready"] is True
    assert status["upload_dir_ready"] is False
    assert status["error"]
