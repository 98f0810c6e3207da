
from fastapi import HTTPException, status
from sqlalchemy.orm import Session, joinedload
from app.errors import FieldValidationError
from app.models.invoice import Invoice
from app.models.supplier import Supplier
from app.schemas.invoice import InvoiceCreate, InvoiceUpdate

def get_invoice(db: Session, invoice_id: int) -> Invoice:
    invoice = (
        db.query(Invoice)
        .options(joinedload(Invoice.supplier))
        .filter(Invoice.id == invoice_id)
        .first()
    )
    if invoice is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invoice not found")
    return invoice

def _check(db: Session, values: dict, invoice_id: int | None = None) -> None:
    errors: dict[str, list[str]] = {}

    if "supplier_id" in values and db.get(Supplier, values["supplier_id"]) is None:
        errors["supplier_id"] = ["The selected supplier id is invalid."]

    if "invoice_number" in values:
        clash = db.query(Invoice.id).filter(Invoice.invoice_number == values["invoice_number"])
        if invoice_id is not None:
            clash = clash.filter(Invoice.id != invoice_id)
        if clash.first() is not None:
            errors["invoice_number"] = ["The invoice number has already been taken."]

    if values.get("due_date") and values.get("invoice_date") and values["due_date"] < values["invoice_date"]:
        errors["due_date"] = ["The due date must be a date after or equal to invoice date."]

    if errors:
        raise FieldValidationError(errors)

def create_invoice(db: Session, body: InvoiceCreate) -> Invoice:
    values = body.model_dump()
    _check(db, values)
    values["tax_amount"] = values["tax_amount"] or 0
    values["status"] = values["status"] or "draft"

    invoice = Invoice(**values)
    db.add(invoice); db.commit()
    return get_invoice(db, invoice.id)

def update_invoice(db: Session, invoice_id: int, body: InvoiceUpdate) -> Invoice:
    invoice = get_invoice(db, invoice_id)
    changes = body.model_dump(exclude_unset=True)

    # date ordering is checked against the record as it will be stored
    merged = {
        "invoice_date": changes.get("invoice_date", invoice.invoice_date),
        "due_date": changes.get("due_date", invoice.due_date),
    }
    _check(db, {**changes, **merged}, invoice_id=invoice.id)

    if "tax_amount" in changes and changes["tax_amount"] is None:
        changes["tax_amount"] = 0
    for field, value in changes.items():
        setattr(invoice, field, value)
    db.commit()
    return get_invoice(db, invoice.id)

def delete_invoice(db: Session, invoice_id: int) -> None:
    invoice = get_invoice(db, invoice_id)
    db.delete(invoice)
    db.commit()
