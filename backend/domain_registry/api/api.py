from fastapi import APIRouter
from domain_registry.api.routes import auth, domains, upload


api_router = APIRouter()

api_router.include_router(auth.router, prefix="", tags=["auth"])
api_router.include_router(domains.router, prefix="", tags=["domains"])
api_router.include_router(upload.router, prefix="", tags=["upload"])
