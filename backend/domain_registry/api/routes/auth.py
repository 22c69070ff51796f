from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from domain_registry.core.database import get_db
from domain_registry.core.exceptions import AuthError, AuthErrorKind, NotFoundError, UsernameTakenError
from domain_registry.core.security import (
    Claims,
    create_access_token,
    get_current_claims,
    hash_password,
    verify_password,
)
from domain_registry.crud import user as user_crud
from domain_registry.schemas.user import AuthResponse, LoginRequest, RegisterRequest, RegisterResponse, UserInfo

router = APIRouter()

@router.post("/register", response_model=RegisterResponse)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    """Create a user with an argon2-hashed password."""
    if user_crud.username_exists(db, payload.username):
        raise UsernameTakenError(payload.username)

    try:
        user_crud.create(db, payload.username, hash_password(payload.password))
    except IntegrityError as e:
        # lost a race against a concurrent registration
        raise UsernameTakenError(payload.username) from e
    return RegisterResponse()

@router.post("/login", response_model=AuthResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    if not payload.username or not payload.password:
        raise AuthError(AuthErrorKind.MISSING_CREDENTIALS)

    u = user_crud.get_by_username(db, payload.username)
    if not u or not verify_password(payload.password, u.password):
        raise AuthError(AuthErrorKind.WRONG_CREDENTIALS)

    return AuthResponse(access_token=create_access_token(u.username))

@router.get("/user/{user_id}", response_model=UserInfo)
def get_user(user_id: str, claims: Claims = Depends(get_current_claims), db: Session = Depends(get_db)):
    u = user_crud.get_by_id(db, user_id)
    if not u:
        raise NotFoundError(f"user {user_id} not found")
    return UserInfo.model_validate(u)
