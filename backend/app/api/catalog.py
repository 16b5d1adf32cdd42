"""Catalog lookup endpoints used while composing invoice lines."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.models.enums import ItemKind
from backend.app.schemas.catalog import CatalogEntry
from backend.app.schemas.invoice_item import CatalogSelection, InvoiceItemInput
from backend.app.services.catalog import apply_catalog_entry, lookup_catalog_item

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/{kind}/{item_id}", response_model=CatalogEntry)
async def get_catalog_item(kind: ItemKind, item_id: int, db: Session = Depends(get_db)):
    entry = lookup_catalog_item(db, kind, item_id)
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Catalog item not found")
    return entry


@router.post("/select", response_model=InvoiceItemInput)
async def select_catalog_item(selection: CatalogSelection, db: Session = Depends(get_db)):
    entry = lookup_catalog_item(db, selection.kind, selection.item_id)
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Catalog item not found")
    return apply_catalog_entry(selection.item, entry)
