# File: domain_registry/models/domain.py
from sqlalchemy import Column, Integer, String, TIMESTAMP, text
from domain_registry.models.base import Base, new_id

def _nullable(type_):
    return Column(type_, nullable=True, server_default=text("NULL"))

class Domain(Base):
    """Domain inventory row. Everything but the name may be filled in later."""
    __tablename__ = "domain"

    id = Column(String(36), primary_key=True, default=new_id)
    domain_name = Column(String(255), nullable=False, unique=True)

    # Site status
    domain_status = _nullable(String(255))
    domain_age = _nullable(Integer)       # 建站年龄
    order_no = _nullable(Integer)         # 记录数
    language = _nullable(String(255))
    title = _nullable(String(255))
    score = _nullable(Integer)
    dns = _nullable(String(255))

    # WHOIS registration
    registrar_name = _nullable(String(255))
    registrar_address = _nullable(String(255))
    registrar_by = _nullable(String(255))
    registrar_at = _nullable(TIMESTAMP)
    expire_at = _nullable(TIMESTAMP)
    email = _nullable(String(255))

    # ICP filing (备案)
    record_name = _nullable(String(255))
    record_no = _nullable(String(255))
    record_status = _nullable(String(255))
    record_at = _nullable(TIMESTAMP)
    record_main_body = _nullable(String(255))
    record_type = _nullable(String(255))

    def __repr__(self):
        return f"<Domain(id={self.id}, domain_name='{self.domain_name}')>"

# Columns an import may fill in; everything except the identity
ENRICHABLE_COLUMNS = [
    c.name for c in Domain.__table__.columns if c.name not in ("id", "domain_name")
]
