from pydantic import BaseModel, ConfigDict, StringConstraints
from typing import Annotated, Optional

Username = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
Password = Annotated[str, StringConstraints(min_length=1, max_length=255)]

class RegisterRequest(BaseModel):
    username: Username
    password: Password

class RegisterResponse(BaseModel):
    status: str = "success"
    message: str = "registered"

class LoginRequest(BaseModel):
    # Both are optional so a missing one maps to "missing credentials"
    username: Optional[str] = None
    password: Optional[str] = None

class AuthResponse(BaseModel):
    access_token: str
    token_type: str = "Bearer"

class UserInfo(BaseModel):
    id: str
    username: str
    role_id: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)
