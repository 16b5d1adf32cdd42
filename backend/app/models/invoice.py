"""Invoice model for patient billing."""

from sqlalchemy import Column, DateTime, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from backend.app.core.time import utc_now
from backend.app.db.base_class import Base


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True, index=True)
    patient_cin = Column(String(50), nullable=False, index=True)
    issued_at = Column(DateTime(timezone=True), nullable=False)

    status = Column(String, default="draft", nullable=False)
    notes = Column(Text, nullable=False, default="")
    created_by = Column(String(255), nullable=False)

    # Written by the billing service from the current items only
    pretax_total = Column(Numeric(10, 2), default=0.00, nullable=False)
    tax_rate = Column(Numeric(5, 2), default=20, nullable=False)
    tax_amount = Column(Numeric(10, 2), default=0.00, nullable=False)
    grand_total = Column(Numeric(10, 2), default=0.00, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    items = relationship(
        "InvoiceItem",
        back_populates="invoice",
        cascade="all, delete-orphan",
        order_by="InvoiceItem.id",
    )
