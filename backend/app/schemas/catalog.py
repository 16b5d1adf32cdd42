"""Product, soin and catalog lookup schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict

from backend.app.models.enums import ItemKind, SoinCategory


class ProductBase(BaseModel):
    name: str = ""
    unit_price: Decimal = Decimal("0")
    stock: int = 0
    created_by: str = ""


class ProductCreate(ProductBase):
    pass


class ProductUpdate(BaseModel):
    name: Optional[str] = None
    unit_price: Optional[Decimal] = None
    stock: Optional[int] = None
    created_by: Optional[str] = None


class ProductStockUpdate(BaseModel):
    stock: int


class ProductRead(ProductBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime


class StockStatistics(BaseModel):
    total_products: int
    out_of_stock: int
    low_stock: int
    in_stock: int
    total_value: Decimal


class SoinBase(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    name: str = ""
    category: Optional[SoinCategory] = None
    unit_price: Decimal = Decimal("0")
    created_by: str = ""


class SoinCreate(SoinBase):
    pass


class SoinUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    name: Optional[str] = None
    category: Optional[SoinCategory] = None
    unit_price: Optional[Decimal] = None
    created_by: Optional[str] = None


class SoinRead(SoinBase):
    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: int
    created_at: datetime


class CatalogEntry(BaseModel):
    """Current catalog values for one billable item."""

    kind: ItemKind
    item_id: int
    name: str
    unit_price: Decimal
