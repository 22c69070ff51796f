# domain_registry/api/routes/upload.py
import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, File, UploadFile

from domain_registry.core import database
from domain_registry.core.config import settings
from domain_registry.core.exceptions import NotFoundError, WorkbookError
from domain_registry.ingest.importer import DomainImporter
from domain_registry.ingest.loader import DomainWorkbookLoader
from domain_registry.ingest.tasks import TaskRegistry, TaskStatus, task_registry
from domain_registry.schemas import TaskBody, UploadResponse
from settings import UploadFiles

logger = logging.getLogger("uvicorn")

router = APIRouter()

IMPORT_TASK_TITLE = "import domains"
CHUNK_SIZE = 1024 * 1024

# ---------- Dependencies ----------
def get_task_registry() -> TaskRegistry:
    return task_registry

# ---------- Helpers ----------
def _save_upload(file: UploadFile) -> Path:
    """Stream the upload into the upload directory under its base name."""
    file_name = Path(file.filename or "").name
    if not file_name:
        raise WorkbookError("uploaded file has no name")
    if Path(file_name).suffix.lower() not in UploadFiles.ALLOWED_SUFFIXES:
        raise WorkbookError(f"unsupported file type: {file_name}")

    upload_dir = Path(UploadFiles.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    target = upload_dir / file_name

    written = 0
    with open(target, "wb") as out:
        while True:
            chunk = file.file.read(CHUNK_SIZE)
            if not chunk:
                break
            written += len(chunk)
            if written > settings.MAX_UPLOAD_BYTES:
                break
            out.write(chunk)

    if written > settings.MAX_UPLOAD_BYTES:
        target.unlink(missing_ok=True)
        raise WorkbookError(f"file exceeds {settings.MAX_UPLOAD_BYTES} bytes")

    logger.info(f"📥 Saved upload {file_name} ({written:,} bytes)")
    return target

# ---------- Endpoints ----------
@router.post("/upload", response_model=UploadResponse, response_model_exclude_none=True)
def upload(
    background_tasks: BackgroundTasks,
    file: Optional[UploadFile] = File(None),
    registry: TaskRegistry = Depends(get_task_registry),
):
    """Accept an .xlsx export and import its rows in the background."""
    if file is None:
        return UploadResponse(status="fail", message="upload failed")

    path = _save_upload(file)
    try:
        records = DomainWorkbookLoader().load_file(path)
    except WorkbookError:
        # unusable workbooks are not kept
        path.unlink(missing_ok=True)
        raise

    task_id = registry.create(IMPORT_TASK_TITLE, len(records))
    importer = DomainImporter(database.SessionLocal, registry)
    background_tasks.add_task(importer.run, task_id, records)

    return UploadResponse(status="success", message="upload succeeded", task_id=task_id)

@router.get("/task/{task_id}", response_model=TaskBody, response_model_exclude_none=True)
def show_task(task_id: str, registry: TaskRegistry = Depends(get_task_registry)):
    """Progress of an import task."""
    task = registry.get(task_id)
    if task is None:
        raise NotFoundError(f"task {task_id} not found")

    return TaskBody(
        title=task.title,
        total=task.total,
        status=task.status.value,
        progress=task.progress if task.status is TaskStatus.PENDING else None,
        err_msg=task.err_msg if task.status is TaskStatus.ERROR else None,
    )
