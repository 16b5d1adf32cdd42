"""Soin (clinical service) catalog endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.core.errors import raise_for_validation_errors
from backend.app.crud.crud_catalog import soin_crud
from backend.app.db.session import get_db
from backend.app.models.enums import SoinCategory
from backend.app.schemas.catalog import SoinCreate, SoinRead, SoinUpdate
from backend.app.services.catalog import validate_soin_data

router = APIRouter(prefix="/soins", tags=["soins"])


def _get_soin_or_404(db: Session, soin_id: int):
    soin = soin_crud.get(db, soin_id=soin_id)
    if not soin:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Soin not found")
    return soin


@router.post("/", response_model=SoinRead, status_code=status.HTTP_201_CREATED)
async def create_soin(soin_in: SoinCreate, db: Session = Depends(get_db)):
    raise_for_validation_errors(validate_soin_data(soin_in))
    return soin_crud.create(db, obj_in=soin_in)


@router.get("/", response_model=List[SoinRead])
async def list_soins(category: Optional[SoinCategory] = None, db: Session = Depends(get_db)):
    return soin_crud.get_multi(db, category=category.value if category else None)


@router.get("/search", response_model=List[SoinRead])
async def search_soins(q: str = "", db: Session = Depends(get_db)):
    return soin_crud.search(db, query=q)


@router.get("/{soin_id}", response_model=SoinRead)
async def get_soin(soin_id: int, db: Session = Depends(get_db)):
    return _get_soin_or_404(db, soin_id)


@router.put("/{soin_id}", response_model=SoinRead)
async def update_soin(soin_id: int, soin_in: SoinUpdate, db: Session = Depends(get_db)):
    soin = _get_soin_or_404(db, soin_id)
    merged = SoinCreate.model_validate(
        {**SoinRead.model_validate(soin).model_dump(), **soin_in.model_dump(exclude_unset=True)}
    )
    raise_for_validation_errors(validate_soin_data(merged))
    return soin_crud.update(db, db_obj=soin, obj_in=soin_in)


@router.delete("/{soin_id}", response_model=SoinRead)
async def delete_soin(soin_id: int, db: Session = Depends(get_db)):
    soin = _get_soin_or_404(db, soin_id)
    return soin_crud.delete(db, db_obj=soin)
