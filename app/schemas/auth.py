
from datetime import datetime
from typing import Literal
from pydantic import BaseModel, EmailStr, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

class RegisterIn(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    # declared before password so the confirmation check can see it
    password_confirmation: str | None = None
    password: str = Field(min_length=8, max_length=255)
    role: Literal["admin", "user"] = "user"

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise PydanticCustomError("required", "The name field is required.")
        return v

    @field_validator("password")
    @classmethod
    def password_confirmed(cls, v: str, info: ValidationInfo) -> str:
        if v != info.data.get("password_confirmation"):
            raise PydanticCustomError("confirmed", "Password confirmation does not match.")
        return v

class LoginIn(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)

class UserOut(BaseModel):
    id: int
    name: str
    email: str
    role: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True

class RegisterOut(BaseModel):
    user: UserOut
    token: str

class LoginOut(BaseModel):
    token: str
    user: UserOut
