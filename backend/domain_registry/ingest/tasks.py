# File: domain_registry/ingest/tasks.py
import threading
import uuid
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Optional


class TaskStatus(str, Enum):
    PENDING = "pending"
    DONE = "done"
    ERROR = "error"


@dataclass
class Task:
    title: str
    total: int
    status: TaskStatus = TaskStatus.PENDING
    progress: int = 0
    err_msg: Optional[str] = None


class TaskRegistry:
    """In-memory progress tracking for background imports."""

    def __init__(self):
        self._tasks: Dict[str, Task] = {}
        self._lock = threading.Lock()

    def create(self, title: str, total: int) -> str:
        task_id = str(uuid.uuid4())
        task = Task(title=title, total=total)
        if total <= 0:
            task.status = TaskStatus.DONE
        with self._lock:
            self._tasks[task_id] = task
        return task_id

    def advance(self, task_id: str) -> Task:
        with self._lock:
            task = self._tasks[task_id]
            if task.status is TaskStatus.PENDING:
                task.progress += 1
                if task.progress >= task.total:
                    task.status = TaskStatus.DONE
            return replace(task)

    def fail(self, task_id: str, message: str) -> None:
        with self._lock:
            task = self._tasks[task_id]
            task.status = TaskStatus.ERROR
            task.err_msg = message

    def get(self, task_id: str) -> Optional[Task]:
        """Snapshot of the task, or None if it is unknown."""
        with self._lock:
            task = self._tasks.get(task_id)
            return replace(task) if task else None

    def __len__(self):
        with self._lock:
            return len(self._tasks)


# Shared by the upload routes and the importer
task_registry = TaskRegistry()
