"""Invoice item model: one billed product or soin."""

from decimal import Decimal

from sqlalchemy import Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from backend.app.db.base_class import Base


class InvoiceItem(Base):
    __tablename__ = "invoice_items"

    id = Column(Integer, primary_key=True, index=True)
    invoice_id = Column(Integer, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False, index=True)
    item_id = Column(Integer, nullable=False)
    item_kind = Column(String(20), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    # Price and name are captured when the invoice is written, not read from the catalog
    unit_price = Column(Numeric(10, 2), nullable=False)
    item_name = Column(String(255), nullable=False, default="")
    created_by = Column(String(255), nullable=False)

    invoice = relationship("Invoice", back_populates="items")

    @property
    def line_total(self) -> Decimal:
        return Decimal(str(self.unit_price)) * self.quantity
