import re
from pydantic import BaseModel, Field, field_validator
from typing import Optional, Any
from datetime import datetime

from models import TaskStatus

_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT_OR_SYMBOL = re.compile(r"[\d\W]")

# bcrypt only accepts up to 72 bytes of input
PASSWORD_MAX_BYTES = 72


class AuthCredentials(BaseModel):
    """Schema for signup"""
    username: str = Field(..., min_length=4, max_length=20)
    password: str = Field(..., min_length=8, max_length=32)

    @field_validator("password")
    @classmethod
    def password_strength(cls, value: str) -> str:
        if not (_UPPER.search(value) and _LOWER.search(value) and _DIGIT_OR_SYMBOL.search(value)):
            raise ValueError(
                "password must contain an upper case letter, a lower case letter "
                "and a number or special character"
            )
        if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise ValueError(f"password must not exceed {PASSWORD_MAX_BYTES} bytes when UTF-8 encoded")
        return value


class SignInRequest(BaseModel):
    """Schema for signin; shape rules are not enforced so every failure is InvalidCredentials"""
    username: str
    password: str


class TokenResponse(BaseModel):
    """Schema for a successful signin"""
    access_token: str
    token_type: str = "bearer"


class TaskCreate(BaseModel):
    """Schema for creating a new task; new tasks always start OPEN"""
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=1000)

    class Config:
        str_strip_whitespace = True


class TaskStatusUpdate(BaseModel):
    """Schema for changing the status of a task"""
    status: TaskStatus


class TaskFilter(BaseModel):
    """Query filters for listing tasks"""
    status: Optional[TaskStatus] = None
    search: Optional[str] = None


class TaskResponse(BaseModel):
    """Schema for task response"""
    id: str
    user_id: str
    title: str
    description: str
    status: TaskStatus
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ApiResponse(BaseModel):
    """Standard API response wrapper"""
    success: bool
    data: Optional[Any] = None
    error: Optional[dict] = None
