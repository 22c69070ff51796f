# File: domain_registry/models/__init__.py
from .base import Base
from .user import User
from .domain import Domain

__all__ = [
    "Base",
    "User",
    "Domain",
]
