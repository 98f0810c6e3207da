
from datetime import date, datetime
from typing import Literal
from pydantic import BaseModel, Field
from app.schemas.supplier import SupplierOut

InvoiceStatus = Literal["draft", "sent", "paid", "overdue", "cancelled"]

class InvoiceCreate(BaseModel):
    supplier_id: int
    invoice_number: str = Field(min_length=1, max_length=100)
    invoice_date: date
    due_date: date
    subtotal: float = Field(ge=0)
    tax_amount: float | None = Field(default=None, ge=0)
    total_amount: float = Field(ge=0)
    status: InvoiceStatus | None = None
    notes: str | None = None

class InvoiceUpdate(BaseModel):
    supplier_id: int = None
    invoice_number: str = Field(default=None, min_length=1, max_length=100)
    invoice_date: date = None
    due_date: date = None
    subtotal: float = Field(default=None, ge=0)
    tax_amount: float | None = Field(default=None, ge=0)
    total_amount: float = Field(default=None, ge=0)
    status: InvoiceStatus = None
    notes: str | None = None

class InvoiceOut(BaseModel):
    id: int
    supplier_id: int
    invoice_number: str
    invoice_date: date
    due_date: date
    subtotal: float
    tax_amount: float
    total_amount: float
    status: str
    notes: str | None
    created_at: datetime
    updated_at: datetime
    supplier: SupplierOut | None = None

    class Config:
        from_attributes = True

class InvoiceListRow(BaseModel):
    """Flat invoice + supplier row; shared by both listing strategies."""
    id: int
    invoice_number: str
    invoice_date: date
    due_date: date
    subtotal: float
    tax_amount: float
    total_amount: float
    status: str
    notes: str | None
    created_at: datetime | None
    updated_at: datetime | None
    supplier_id: int
    supplier_name: str
    supplier_email: str | None
    supplier_phone: str | None
    supplier_address: str | None
    supplier_contact_person: str | None
    supplier_tax_id: str | None
    supplier_is_active: bool
