# domain_registry/schemas/domain.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class DomainRecord(BaseModel):
    """One parsed spreadsheet row, ready to be written to the domain table."""
    domain_name: str
    domain_age: Optional[int] = None
    order_no: Optional[int] = None
    language: Optional[str] = None
    title: Optional[str] = None
    score: Optional[int] = None
    dns: Optional[str] = None
    registrar_name: Optional[str] = None
    registrar_address: Optional[str] = None
    registrar_by: Optional[str] = None
    email: Optional[str] = None
    registrar_at: Optional[datetime] = None
    expire_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None  # parsed, no column for it
    record_status: Optional[str] = None
    record_at: Optional[datetime] = None
    record_main_body: Optional[str] = None
    record_type: Optional[str] = None
    record_no: Optional[str] = None
    record_name: Optional[str] = None


class DomainData(BaseModel):
    id: str
    domain_name: str
    domain_status: Optional[str] = None
    domain_age: Optional[int] = None
    order_no: Optional[int] = None
    language: Optional[str] = None
    title: Optional[str] = None
    score: Optional[int] = None
    dns: Optional[str] = None
    registrar_name: Optional[str] = None
    registrar_address: Optional[str] = None
    registrar_by: Optional[str] = None
    registrar_at: Optional[datetime] = None
    expire_at: Optional[datetime] = None
    email: Optional[str] = None
    record_name: Optional[str] = None
    record_no: Optional[str] = None
    record_status: Optional[str] = None
    record_at: Optional[datetime] = None
    record_main_body: Optional[str] = None
    record_type: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class PaginationMeta(BaseModel):
    page: int
    page_size: int
    total_count: int
    total_pages: int
    has_next: bool
    has_previous: bool


class PaginatedDomainResponse(BaseModel):
    data: List[DomainData]
    pagination: PaginationMeta
