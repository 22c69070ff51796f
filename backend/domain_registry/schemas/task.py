from pydantic import BaseModel
from typing import Literal, Optional

class UploadResponse(BaseModel):
    status: Literal["success", "fail"]
    message: str
    task_id: Optional[str] = None

class TaskBody(BaseModel):
    "Import task progress"
    title: str
    total: int
    status: Literal["pending", "done", "error"]
    progress: Optional[int] = None
    err_msg: Optional[str] = None
