# schemas/user.py
from pydantic import BaseModel
from typing import Optional


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class RegisterRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


class UserResponse(BaseModel):
    """パスワード（ハッシュ含む）は絶対に返さない"""
    id: int
    username: str
    role: str

    class Config:
        from_attributes = True
