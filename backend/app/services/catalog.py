"""Catalog lookup and product/soin business rules."""

from decimal import Decimal
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from backend.app.crud.crud_catalog import product_crud, soin_crud
from backend.app.models.enums import ItemKind
from backend.app.models.product import Product
from backend.app.schemas.catalog import CatalogEntry, ProductCreate, SoinCreate, StockStatistics
from backend.app.schemas.invoice_item import InvoiceItemInput

LOW_STOCK_THRESHOLD = 10


def lookup_catalog_item(db: Session, kind: ItemKind, item_id: int) -> Optional[CatalogEntry]:
    """Return the current name and unit price of a product or soin, or None when unknown."""
    if item_id is None or item_id <= 0:
        return None
    kind = ItemKind(kind)
    if kind is ItemKind.PRODUCT:
        record = product_crud.get(db, product_id=item_id)
    elif kind is ItemKind.SOIN:
        record = soin_crud.get(db, soin_id=item_id)
    else:
        raise ValueError(f"Unhandled item kind: {kind}")
    if record is None:
        return None
    return CatalogEntry(
        kind=kind,
        item_id=record.id,
        name=record.name,
        unit_price=Decimal(str(record.unit_price)),
    )


def apply_catalog_entry(line: InvoiceItemInput, entry: CatalogEntry) -> InvoiceItemInput:
    """Copy the catalog's current price and name into a line item."""
    return line.model_copy(
        update={
            "item_id": entry.item_id,
            "item_kind": entry.kind,
            "unit_price": entry.unit_price,
            "item_name": entry.name,
        }
    )


def validate_product_data(form: ProductCreate) -> List[str]:
    errors: List[str] = []
    if not form.name.strip():
        errors.append("Product name is required")
    if form.unit_price is None or form.unit_price <= 0:
        errors.append("Price must be greater than 0")
    if form.stock < 0:
        errors.append("Stock cannot be negative")
    if not form.created_by.strip():
        errors.append("Creator is required")
    return errors


def validate_soin_data(form: SoinCreate) -> List[str]:
    errors: List[str] = []
    if not form.name.strip():
        errors.append("Soin name is required")
    if not form.category:
        errors.append("Soin category is required")
    if form.unit_price is None or form.unit_price <= 0:
        errors.append("Price must be greater than 0")
    if not form.created_by.strip():
        errors.append("Creator is required")
    return errors


def get_stock_status(stock: int) -> str:
    if stock == 0:
        return "Rupture"
    if stock <= LOW_STOCK_THRESHOLD:
        return "Stock faible"
    return "En stock"


def calculate_inventory_value(products: Iterable[Product]) -> Decimal:
    return sum(
        (Decimal(str(product.unit_price)) * product.stock for product in products),
        Decimal("0.00"),
    )


def get_stock_statistics(products: List[Product]) -> StockStatistics:
    statuses = [get_stock_status(product.stock) for product in products]
    return StockStatistics(
        total_products=len(products),
        out_of_stock=statuses.count("Rupture"),
        low_stock=statuses.count("Stock faible"),
        in_stock=statuses.count("En stock"),
        total_value=calculate_inventory_value(products).quantize(Decimal("0.01")),
    )
