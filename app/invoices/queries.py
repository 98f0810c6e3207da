"""Invoice listing: optional stored-procedure fast path with an ORM fallback.

Both strategies return rows validated through InvoiceListRow, so callers see
the same shape whichever one answered.
"""

import enum
import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.invoice import Invoice
from app.models.supplier import Supplier
from app.schemas.invoice import InvoiceListRow

logger = logging.getLogger(__name__)


class Dialect(str, enum.Enum):
    sqlite = "sqlite"
    mysql = "mysql"
    mariadb = "mariadb"
    postgresql = "postgresql"
    mssql = "mssql"


# SQLite has no stored procedures, so it never gets an entry.
FAST_PATH_QUERIES: dict[Dialect, str] = {
    Dialect.mysql: "CALL sp_list_invoices_with_suppliers()",
    Dialect.mariadb: "CALL sp_list_invoices_with_suppliers()",
    Dialect.postgresql: "SELECT * FROM sp_list_invoices_with_suppliers()",
    Dialect.mssql: "EXEC dbo.sp_list_invoices_with_suppliers",
}


def resolve_dialect(db: Session) -> Dialect | None:
    try:
        return Dialect(db.get_bind().dialect.name)
    except ValueError:
        return None


def list_via_procedure(db: Session, sql: str) -> list[InvoiceListRow]:
    rows = db.execute(text(sql)).mappings().all()
    return [InvoiceListRow.model_validate(dict(row)) for row in rows]


def list_via_orm(db: Session) -> list[InvoiceListRow]:
    query = (
        db.query(
            Invoice.id,
            Invoice.invoice_number,
            Invoice.invoice_date,
            Invoice.due_date,
            Invoice.subtotal,
            Invoice.tax_amount,
            Invoice.total_amount,
            Invoice.status,
            Invoice.notes,
            Invoice.created_at,
            Invoice.updated_at,
            Supplier.id.label("supplier_id"),
            Supplier.name.label("supplier_name"),
            Supplier.email.label("supplier_email"),
            Supplier.phone.label("supplier_phone"),
            Supplier.address.label("supplier_address"),
            Supplier.contact_person.label("supplier_contact_person"),
            Supplier.tax_id.label("supplier_tax_id"),
            Supplier.is_active.label("supplier_is_active"),
        )
        .join(Supplier, Invoice.supplier_id == Supplier.id)
        .order_by(Invoice.invoice_date.desc(), Invoice.created_at.desc())
    )
    return [InvoiceListRow.model_validate(dict(row._mapping)) for row in query.all()]


def list_invoices_with_suppliers(db: Session, use_fast_path: bool) -> list[InvoiceListRow]:
    if use_fast_path:
        sql = FAST_PATH_QUERIES.get(resolve_dialect(db))
        if sql is not None:
            try:
                return list_via_procedure(db, sql)
            except SQLAlchemyError as exc:
                db.rollback()
                logger.warning("stored procedure failed, falling back to ORM listing: %s", exc)

    return list_via_orm(db)
