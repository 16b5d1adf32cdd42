"""Invoice schemas."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from backend.app.models.enums import InvoiceStatus
from backend.app.schemas.invoice_item import InvoiceItemInput, InvoiceItemRead


class InvoiceForm(BaseModel):
    """Full invoice payload used for both creation and replacement."""

    patient_cin: str = ""
    issued_at: Optional[datetime] = None
    status: InvoiceStatus = InvoiceStatus.DRAFT
    notes: str = ""
    created_by: str = ""
    items: List[InvoiceItemInput] = []


class InvoiceStatusUpdate(BaseModel):
    status: InvoiceStatus


class InvoiceTotals(BaseModel):
    pretax_total: Decimal
    tax_amount: Decimal
    tax_rate: Decimal
    grand_total: Decimal


class InvoiceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    patient_cin: str
    issued_at: datetime
    status: InvoiceStatus
    notes: str
    created_by: str

    pretax_total: Decimal
    tax_rate: Decimal
    tax_amount: Decimal
    grand_total: Decimal

    created_at: datetime
    items: List[InvoiceItemRead] = []


class InvoiceStatistics(BaseModel):
    total_invoices: int
    total_revenue: Decimal
    paid_invoices: int
    pending_invoices: int
    overdue_invoices: int
    draft_invoices: int
    average_invoice_value: Decimal
