# domain_registry/crud/__init__.py
from .domain import domain_crud

__all__ = ["domain_crud"]
