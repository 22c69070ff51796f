from typing import Optional

from sqlalchemy import Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column
from domain_registry.models.base import Base, new_id

class User(Base):
    __tablename__ = "user"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    # argon2 encoded hash when written through the API
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    role_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, server_default=text("NULL"))

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"
