# payroll_app/schemas/auth_schema.py
from pydantic import BaseModel
from typing import Optional


class LoginSchema(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class RegisterSchema(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


class UserOut(BaseModel):
    id: int
    username: str
    role: str


class LoginResponse(BaseModel):
    token: str
    user: UserOut
