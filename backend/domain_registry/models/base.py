# File: domain_registry/models/base.py
import uuid

from sqlalchemy.orm import DeclarativeBase

class Base(DeclarativeBase):
    pass

def new_id() -> str:
    """Primary keys are UUID4 strings (36 chars)."""
    return str(uuid.uuid4())
