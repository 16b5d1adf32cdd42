"""Product catalog endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.core.errors import raise_for_validation_errors
from backend.app.crud.crud_catalog import product_crud
from backend.app.db.session import get_db
from backend.app.schemas.catalog import (
    ProductCreate,
    ProductRead,
    ProductStockUpdate,
    ProductUpdate,
    StockStatistics,
)
from backend.app.services.catalog import LOW_STOCK_THRESHOLD, get_stock_statistics, validate_product_data

router = APIRouter(prefix="/products", tags=["products"])


def _get_product_or_404(db: Session, product_id: int):
    product = product_crud.get(db, product_id=product_id)
    if not product:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return product


@router.post("/", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def create_product(product_in: ProductCreate, db: Session = Depends(get_db)):
    raise_for_validation_errors(validate_product_data(product_in))
    return product_crud.create(db, obj_in=product_in)


@router.get("/", response_model=List[ProductRead])
async def list_products(db: Session = Depends(get_db)):
    return product_crud.get_multi(db)


@router.get("/search", response_model=List[ProductRead])
async def search_products(q: str = "", db: Session = Depends(get_db)):
    return product_crud.search(db, query=q)


@router.get("/low-stock", response_model=List[ProductRead])
async def list_low_stock_products(threshold: int = LOW_STOCK_THRESHOLD, db: Session = Depends(get_db)):
    return product_crud.get_low_stock(db, threshold=threshold)


@router.get("/statistics", response_model=StockStatistics)
async def product_stock_statistics(db: Session = Depends(get_db)):
    return get_stock_statistics(product_crud.get_multi(db))


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(product_id: int, db: Session = Depends(get_db)):
    return _get_product_or_404(db, product_id)


@router.put("/{product_id}", response_model=ProductRead)
async def update_product(product_id: int, product_in: ProductUpdate, db: Session = Depends(get_db)):
    product = _get_product_or_404(db, product_id)
    merged = ProductCreate.model_validate(
        {**ProductRead.model_validate(product).model_dump(), **product_in.model_dump(exclude_unset=True)}
    )
    raise_for_validation_errors(validate_product_data(merged))
    return product_crud.update(db, db_obj=product, obj_in=product_in)


@router.patch("/{product_id}/stock", response_model=ProductRead)
async def update_product_stock(product_id: int, payload: ProductStockUpdate, db: Session = Depends(get_db)):
    product = _get_product_or_404(db, product_id)
    if payload.stock < 0:
        raise_for_validation_errors(["Stock cannot be negative"])
    return product_crud.set_stock(db, db_obj=product, stock=payload.stock)


@router.delete("/{product_id}", response_model=ProductRead)
async def delete_product(product_id: int, db: Session = Depends(get_db)):
    product = _get_product_or_404(db, product_id)
    return product_crud.delete(db, db_obj=product)
