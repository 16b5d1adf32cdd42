"""Billing service utilities: invoice totals, validation and persistence."""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from backend.app.models.enums import InvoiceStatus
from backend.app.models.invoice import Invoice
from backend.app.models.invoice_item import InvoiceItem
from backend.app.schemas.invoice import InvoiceForm, InvoiceStatistics, InvoiceTotals

logger = logging.getLogger(__name__)

TAX_RATE = Decimal("20")
CENTS = Decimal("0.01")


def _to_decimal(value) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_money(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def compute_invoice_totals(items: Iterable) -> InvoiceTotals:
    """Sum line totals, then derive VAT and grand total.

    Lines are not rounded. VAT is rounded on its own, then added to the
    unrounded pre-tax total and the sum rounded again.
    """
    pretax_total = sum(
        (_to_decimal(item.unit_price) * item.quantity for item in items),
        Decimal("0"),
    )
    tax_amount = round_money(pretax_total * TAX_RATE / Decimal("100"))
    grand_total = round_money(pretax_total + tax_amount)
    return InvoiceTotals(
        pretax_total=pretax_total,
        tax_amount=tax_amount,
        tax_rate=TAX_RATE,
        grand_total=grand_total,
    )


def validate_invoice(form: InvoiceForm) -> List[str]:
    errors: List[str] = []

    if not form.patient_cin.strip():
        errors.append("Patient CIN is required")
    if form.issued_at is None:
        errors.append("Invoice date is required")
    if not form.created_by.strip():
        errors.append("Creator is required")

    if not form.items:
        errors.append("At least one item is required")
        return errors

    for position, item in enumerate(form.items, start=1):
        if not item.item_id:
            errors.append(f"Article {position} must have a product or service selected")
        if item.quantity <= 0:
            errors.append(f"Article {position} must have a quantity greater than 0")
        if item.unit_price <= 0:
            errors.append(f"Article {position} must have a price greater than 0")
    return errors


def capture_unit_price(value) -> Decimal:
    """Round a submitted price to the cents stored on the invoice item."""
    return round_money(_to_decimal(value))


def _apply_totals(invoice: Invoice) -> None:
    # Totals come from the captured items so they match what is persisted
    totals = compute_invoice_totals(invoice.items)
    invoice.pretax_total = totals.pretax_total
    invoice.tax_rate = totals.tax_rate
    invoice.tax_amount = totals.tax_amount
    invoice.grand_total = totals.grand_total


def _build_items(form: InvoiceForm) -> List[InvoiceItem]:
    return [
        InvoiceItem(
            item_id=item.item_id,
            item_kind=item.item_kind.value,
            quantity=item.quantity,
            unit_price=capture_unit_price(item.unit_price),
            item_name=item.item_name,
            created_by=form.created_by.strip(),
        )
        for item in form.items
    ]


def create_invoice(db: Session, form: InvoiceForm) -> Invoice:
    invoice = Invoice(
        patient_cin=form.patient_cin.strip(),
        issued_at=form.issued_at,
        status=form.status.value,
        notes=form.notes,
        created_by=form.created_by.strip(),
    )
    invoice.items = _build_items(form)
    _apply_totals(invoice)
    db.add(invoice)
    db.commit()
    db.refresh(invoice)
    logger.info(
        "Created invoice %s for %s with %d items, total %s",
        invoice.id,
        invoice.patient_cin,
        len(invoice.items),
        invoice.grand_total,
    )
    return invoice


def update_invoice(db: Session, invoice: Invoice, form: InvoiceForm) -> Invoice:
    """Overwrite an invoice; its items are replaced as a whole, never merged."""
    invoice.patient_cin = form.patient_cin.strip()
    invoice.issued_at = form.issued_at
    invoice.status = form.status.value
    invoice.notes = form.notes
    invoice.created_by = form.created_by.strip()
    invoice.items = _build_items(form)
    _apply_totals(invoice)
    db.commit()
    db.refresh(invoice)
    logger.info("Updated invoice %s, %d items, total %s", invoice.id, len(invoice.items), invoice.grand_total)
    return invoice


def update_invoice_status(db: Session, invoice: Invoice, status: InvoiceStatus) -> Invoice:
    previous = invoice.status
    invoice.status = InvoiceStatus(status).value
    db.commit()
    db.refresh(invoice)
    logger.info("Invoice %s status %s -> %s", invoice.id, previous, invoice.status)
    return invoice


def delete_invoice(db: Session, invoice: Invoice) -> Invoice:
    db.delete(invoice)
    db.commit()
    logger.info("Deleted invoice %s", invoice.id)
    return invoice


def get_invoice(db: Session, invoice_id: int) -> Optional[Invoice]:
    return db.query(Invoice).filter(Invoice.id == invoice_id).first()


def list_invoices(
    db: Session,
    status: Optional[InvoiceStatus] = None,
    patient_cin: Optional[str] = None,
) -> List[Invoice]:
    query = db.query(Invoice)
    if status:
        query = query.filter(Invoice.status == InvoiceStatus(status).value)
    if patient_cin:
        query = query.filter(Invoice.patient_cin == patient_cin)
    return query.order_by(Invoice.issued_at.desc(), Invoice.id.desc()).all()


def search_invoices(db: Session, query: str) -> List[Invoice]:
    needle = query.lower()
    return [
        invoice
        for invoice in list_invoices(db)
        if needle in invoice.patient_cin.lower()
        or needle in invoice.created_by.lower()
        or needle in (invoice.notes or "").lower()
    ]


def get_invoice_statistics(db: Session) -> InvoiceStatistics:
    return summarize_invoices(list_invoices(db))


def summarize_invoices(invoices: List[Invoice]) -> InvoiceStatistics:
    total_invoices = len(invoices)
    total_revenue = sum((_to_decimal(invoice.grand_total) for invoice in invoices), Decimal("0.00"))
    statuses = [invoice.status for invoice in invoices]
    average = round_money(total_revenue / total_invoices) if total_invoices else Decimal("0.00")
    return InvoiceStatistics(
        total_invoices=total_invoices,
        total_revenue=round_money(total_revenue),
        paid_invoices=statuses.count(InvoiceStatus.PAID.value),
        pending_invoices=statuses.count(InvoiceStatus.SENT.value),
        overdue_invoices=statuses.count(InvoiceStatus.OVERDUE.value),
        draft_invoices=statuses.count(InvoiceStatus.DRAFT.value),
        average_invoice_value=average,
    )
