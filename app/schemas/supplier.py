
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field

class SupplierCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=50)
    address: str | None = None
    contact_person: str | None = Field(default=None, max_length=255)
    tax_id: str | None = Field(default=None, max_length=100)
    is_active: bool = True

class SupplierUpdate(BaseModel):
    name: str = Field(default=None, min_length=1, max_length=255)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=50)
    address: str | None = None
    contact_person: str | None = Field(default=None, max_length=255)
    tax_id: str | None = Field(default=None, max_length=100)
    is_active: bool = None

class SupplierOut(BaseModel):
    id: int
    name: str
    email: str | None
    phone: str | None
    address: str | None
    contact_person: str | None
    tax_id: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
