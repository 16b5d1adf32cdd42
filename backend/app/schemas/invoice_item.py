"""Invoice item schemas."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from backend.app.models.enums import ItemKind


class InvoiceItemInput(BaseModel):
    item_id: int = 0
    item_kind: ItemKind = ItemKind.PRODUCT
    quantity: int = 1
    unit_price: Decimal = Decimal("0")
    item_name: str = ""


class InvoiceItemRead(InvoiceItemInput):
    model_config = ConfigDict(from_attributes=True)

    id: int
    invoice_id: int
    created_by: str
    line_total: Decimal


class CatalogSelection(BaseModel):
    item: InvoiceItemInput
    kind: ItemKind
    item_id: int
