
from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from app.db.session import Base
from app.models.user import utcnow

INVOICE_STATUSES = ("draft", "sent", "paid", "overdue", "cancelled")

class Invoice(Base):
    __tablename__ = "invoices"
    id = Column(Integer, primary_key=True, index=True)
    supplier_id = Column(Integer, ForeignKey("suppliers.id", ondelete="CASCADE"), nullable=False, index=True)
    invoice_number = Column(String(100), unique=True, index=True, nullable=False)
    invoice_date = Column(Date, nullable=False, index=True)
    due_date = Column(Date, nullable=False)
    subtotal = Column(Numeric(12, 2, asdecimal=False), nullable=False, default=0)
    tax_amount = Column(Numeric(12, 2, asdecimal=False), nullable=False, default=0)
    total_amount = Column(Numeric(12, 2, asdecimal=False), nullable=False, default=0)
    status = Column(String(20), nullable=False, default="draft")
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    supplier = relationship("Supplier", back_populates="invoices")
