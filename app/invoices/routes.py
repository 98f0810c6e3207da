
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.auth.deps import get_db
from app.config import settings
from app.invoices import service
from app.invoices.queries import list_invoices_with_suppliers
from app.schemas.invoice import InvoiceCreate, InvoiceUpdate, InvoiceOut, InvoiceListRow

router = APIRouter(prefix="/invoices", tags=["invoices"])

@router.get("", response_model=list[InvoiceListRow])
def list_invoices(db: Session = Depends(get_db)):
    return list_invoices_with_suppliers(db, use_fast_path=settings.use_sp_invoices)

@router.post("", response_model=InvoiceOut, status_code=status.HTTP_201_CREATED)
def create_invoice(body: InvoiceCreate, db: Session = Depends(get_db)):
    return service.create_invoice(db, body)

@router.get("/{invoice_id}", response_model=InvoiceOut)
def get_invoice(invoice_id: int, db: Session = Depends(get_db)):
    return service.get_invoice(db, invoice_id)

@router.put("/{invoice_id}", response_model=InvoiceOut)
def update_invoice(invoice_id: int, body: InvoiceUpdate, db: Session = Depends(get_db)):
    return service.update_invoice(db, invoice_id, body)

@router.delete("/{invoice_id}")
def delete_invoice(invoice_id: int, db: Session = Depends(get_db)):
    service.delete_invoice(db, invoice_id)
    return {"message": "Invoice deleted successfully"}
