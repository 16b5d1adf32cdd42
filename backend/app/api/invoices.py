"""Invoice routes."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.core.errors import raise_for_validation_errors
from backend.app.db.session import get_db
from backend.app.models.enums import InvoiceStatus
from backend.app.models.invoice import Invoice
from backend.app.schemas.invoice import (
    InvoiceForm,
    InvoiceRead,
    InvoiceStatistics,
    InvoiceStatusUpdate,
    InvoiceTotals,
)
from backend.app.schemas.invoice_item import InvoiceItemInput
from backend.app.services.billing import (
    compute_invoice_totals,
    create_invoice,
    delete_invoice,
    get_invoice,
    get_invoice_statistics,
    list_invoices,
    search_invoices,
    update_invoice,
    update_invoice_status,
    validate_invoice,
)

router = APIRouter(prefix="/invoices", tags=["invoices"])


def _get_invoice_or_404(db: Session, invoice_id: int) -> Invoice:
    invoice = get_invoice(db, invoice_id)
    if not invoice:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invoice not found")
    return invoice


@router.get("/", response_model=List[InvoiceRead])
async def list_all_invoices(
    status: Optional[InvoiceStatus] = None,
    patient_cin: Optional[str] = None,
    db: Session = Depends(get_db),
):
    return list_invoices(db, status=status, patient_cin=patient_cin)


@router.get("/search", response_model=List[InvoiceRead])
async def search_all_invoices(q: str = "", db: Session = Depends(get_db)):
    return search_invoices(db, q)


@router.get("/statistics", response_model=InvoiceStatistics)
async def invoice_statistics(db: Session = Depends(get_db)):
    return get_invoice_statistics(db)


@router.post("/totals", response_model=InvoiceTotals)
async def preview_invoice_totals(items: List[InvoiceItemInput]):
    return compute_invoice_totals(items)


@router.post("/validate", response_model=List[str])
async def check_invoice(payload: InvoiceForm):
    return validate_invoice(payload)


@router.post("/", response_model=InvoiceRead, status_code=status.HTTP_201_CREATED)
async def create_new_invoice(payload: InvoiceForm, db: Session = Depends(get_db)):
    raise_for_validation_errors(validate_invoice(payload))
    return create_invoice(db, payload)


@router.get("/{invoice_id}", response_model=InvoiceRead)
async def get_single_invoice(invoice_id: int, db: Session = Depends(get_db)):
    return _get_invoice_or_404(db, invoice_id)


@router.put("/{invoice_id}", response_model=InvoiceRead)
async def replace_invoice(invoice_id: int, payload: InvoiceForm, db: Session = Depends(get_db)):
    invoice = _get_invoice_or_404(db, invoice_id)
    raise_for_validation_errors(validate_invoice(payload))
    return update_invoice(db, invoice, payload)


@router.patch("/{invoice_id}/status", response_model=InvoiceRead)
async def change_invoice_status(invoice_id: int, payload: InvoiceStatusUpdate, db: Session = Depends(get_db)):
    invoice = _get_invoice_or_404(db, invoice_id)
    return update_invoice_status(db, invoice, payload.status)


@router.delete("/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_invoice(invoice_id: int, db: Session = Depends(get_db)):
    invoice = _get_invoice_or_404(db, invoice_id)
    delete_invoice(db, invoice)
