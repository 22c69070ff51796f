# domain_registry/api/routes/domains.py
from fastapi import APIRouter, Depends, Query, HTTPException
from sqlalchemy.orm import Session
from typing import Optional

from domain_registry.core.database import get_db
from domain_registry.core.exceptions import NotFoundError
from domain_registry.core.security import get_current_claims
from domain_registry.crud import domain_crud
from domain_registry.crud.domain import SORTABLE_FIELDS
from domain_registry.schemas import DomainData, PaginatedDomainResponse, PaginationMeta

router = APIRouter(dependencies=[Depends(get_current_claims)])

@router.get("/domains", response_model=PaginatedDomainResponse)
def list_domains(
    q: Optional[str] = Query(None, description="Substring of the domain name or title"),
    record_status: Optional[str] = Query(None, description="Exact ICP filing status"),
    page: int = Query(1, ge=1, description="Page number (1-based)"),
    page_size: int = Query(50, ge=1, le=1000, description="Items per page"),
    sort_by: str = Query("domain_name", description="Sort field"),
    sort_order: str = Query("asc", description="Sort order: asc, desc"),
    db: Session = Depends(get_db)
):
    """Get a paginated listing of the domain inventory."""

    if sort_by not in SORTABLE_FIELDS:
        raise HTTPException(status_code=400, detail=f"Invalid sort_by field: {sort_by}")
    if sort_order not in ("asc", "desc"):
        raise HTTPException(status_code=400, detail=f"Invalid sort_order: {sort_order}")

    results, total_count = domain_crud.get_page(
        db=db,
        q=q,
        record_status=record_status,
        page=page,
        page_size=page_size,
        sort_by=sort_by,
        sort_order=sort_order
    )

    total_pages = (total_count + page_size - 1) // page_size

    pagination_meta = PaginationMeta(
        page=page,
        page_size=page_size,
        total_count=total_count,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_previous=page > 1
    )

    return PaginatedDomainResponse(
        data=[DomainData.model_validate(row) for row in results],
        pagination=pagination_meta
    )

@router.get("/domains/{domain_name}", response_model=DomainData)
def get_domain(domain_name: str, db: Session = Depends(get_db)):
    """Get every stored field of one domain."""

    result = domain_crud.get_by_name(db, domain_name)
    if not result:
        raise NotFoundError(f"domain {domain_name} not found")

    return DomainData.model_validate(result)
