# domain_registry/schemas/__init__.py
from .user import (
    RegisterRequest,
    RegisterResponse,
    LoginRequest,
    AuthResponse,
    UserInfo,
)

from .domain import (
    DomainRecord,
    DomainData,
    PaginationMeta,
    PaginatedDomainResponse,
)

from .task import (
    UploadResponse,
    TaskBody,
)
