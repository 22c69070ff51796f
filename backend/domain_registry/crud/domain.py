# domain_registry/crud/domain.py
from sqlalchemy.orm import Session
from sqlalchemy import select, func, or_
from sqlalchemy.exc import IntegrityError
from typing import Optional, List, Tuple

from domain_registry.models import Domain
from domain_registry.models.domain import ENRICHABLE_COLUMNS
from domain_registry.schemas.domain import DomainRecord

SORTABLE_FIELDS = ["domain_name", "score", "domain_age", "expire_at", "registrar_at", "record_at"]

class DomainCRUD:
    """Database operations for the domain inventory"""

    def get_by_name(self, db: Session, domain_name: str) -> Optional[Domain]:
        return db.scalar(select(Domain).where(Domain.domain_name == domain_name))

    def get_by_id(self, db: Session, domain_id: str) -> Optional[Domain]:
        return db.get(Domain, domain_id)

    def create(self, db: Session, domain_name: str, **fields) -> Domain:
        domain = Domain(domain_name=domain_name, **fields)
        db.add(domain)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise
        db.refresh(domain)
        return domain

    def upsert_record(self, db: Session, record: DomainRecord) -> Tuple[Domain, bool]:
        """
        Insert the record, or enrich the existing row with the same name.
        Only non-null values overwrite what is stored.
        Returns (domain, created)
        """
        values = {
            key: value
            for key, value in record.model_dump(include=set(ENRICHABLE_COLUMNS)).items()
            if value is not None
        }

        domain = self.get_by_name(db, record.domain_name)
        if domain is None:
            domain = Domain(domain_name=record.domain_name, **values)
            db.add(domain)
            try:
                db.commit()
                return domain, True
            except IntegrityError:
                db.rollback()
                # another writer inserted the same name since the lookup
                domain = self.get_by_name(db, record.domain_name)
                if domain is None:
                    raise

        for key, value in values.items():
            setattr(domain, key, value)

        db.add(domain)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise
        return domain, False

    def get_page(
        self,
        db: Session,
        q: Optional[str] = None,
        record_status: Optional[str] = None,
        page: int = 1,
        page_size: int = 50,
        sort_by: str = "domain_name",
        sort_order: str = "asc"
    ) -> Tuple[List[Domain], int]:
        """
        Get a page of domains matching the filters.
        Returns (results, total_count)
        """
        query = select(Domain)

        if q:
            pattern = f"%{q.strip().lower()}%"
            query = query.where(or_(
                func.lower(Domain.domain_name).like(pattern),
                func.lower(Domain.title).like(pattern),
            ))
        if record_status:
            query = query.where(Domain.record_status == record_status)

        total_count = db.scalar(select(func.count()).select_from(query.subquery())) or 0

        sort_column = getattr(Domain, sort_by)
        if sort_order == "desc":
            query = query.order_by(sort_column.desc().nulls_last(), Domain.domain_name)
        else:
            query = query.order_by(sort_column.asc().nulls_last(), Domain.domain_name)

        offset = (page - 1) * page_size
        results = db.scalars(query.offset(offset).limit(page_size)).all()

        return list(results), total_count

    def count(self, db: Session) -> int:
        return db.scalar(select(func.count()).select_from(Domain)) or 0

# Create instance
domain_crud = DomainCRUD()
