# crud/user.py
from typing import Optional

from sqlalchemy.orm import Session
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from domain_registry.models.user import User

def get_by_username(db: Session, username: str) -> User | None:
    return db.scalar(select(User).where(User.username == username))

def get_by_id(db: Session, user_id: str) -> User | None:
    return db.get(User, user_id)

def username_exists(db: Session, username: str) -> bool:
    return bool(db.scalar(select(select(User.id).where(User.username == username).exists())))

def create(db: Session, username: str, password_hash: str, role_id: Optional[int] = None) -> User:
    u = User(username=username, password=password_hash, role_id=role_id)
    db.add(u)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise
    db.refresh(u)
    return u

def count(db: Session) -> int:
    return db.scalar(select(func.count()).select_from(User)) or 0
