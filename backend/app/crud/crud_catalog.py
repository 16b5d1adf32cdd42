"""CRUD operations for catalog products and soins."""

from typing import List, Optional

from sqlalchemy.orm import Session

from backend.app.models.product import Product
from backend.app.models.soin import Soin
from backend.app.schemas.catalog import ProductCreate, ProductUpdate, SoinCreate, SoinUpdate


class CRUDProduct:
    def create(self, db: Session, *, obj_in: ProductCreate) -> Product:
        obj = Product(**obj_in.model_dump())
        db.add(obj)
        db.commit()
        db.refresh(obj)
        return obj

    def get(self, db: Session, *, product_id: int) -> Optional[Product]:
        return db.query(Product).filter(Product.id == product_id).first()

    def get_multi(self, db: Session) -> List[Product]:
        return db.query(Product).order_by(Product.name.asc(), Product.id.asc()).all()

    def get_low_stock(self, db: Session, *, threshold: int = 10) -> List[Product]:
        return (
            db.query(Product)
            .filter(Product.stock <= threshold)
            .order_by(Product.stock.asc(), Product.id.asc())
            .all()
        )

    def search(self, db: Session, *, query: str) -> List[Product]:
        needle = query.lower()
        return [
            product
            for product in self.get_multi(db)
            if needle in product.name.lower() or needle in product.created_by.lower()
        ]

    def update(self, db: Session, *, db_obj: Product, obj_in: ProductUpdate) -> Product:
        update_data = obj_in.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(db_obj, field, value)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def set_stock(self, db: Session, *, db_obj: Product, stock: int) -> Product:
        db_obj.stock = stock
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, db_obj: Product) -> Product:
        db.delete(db_obj)
        db.commit()
        return db_obj


class CRUDSoin:
    def create(self, db: Session, *, obj_in: SoinCreate) -> Soin:
        obj = Soin(**obj_in.model_dump())
        db.add(obj)
        db.commit()
        db.refresh(obj)
        return obj

    def get(self, db: Session, *, soin_id: int) -> Optional[Soin]:
        return db.query(Soin).filter(Soin.id == soin_id).first()

    def get_multi(self, db: Session, *, category: Optional[str] = None) -> List[Soin]:
        query = db.query(Soin)
        if category:
            query = query.filter(Soin.category == category)
        return query.order_by(Soin.name.asc(), Soin.id.asc()).all()

    def search(self, db: Session, *, query: str) -> List[Soin]:
        needle = query.lower()
        return [
            soin
            for soin in self.get_multi(db)
            if needle in soin.name.lower()
            or needle in soin.category.lower()
            or needle in soin.created_by.lower()
        ]

    def update(self, db: Session, *, db_obj: Soin, obj_in: SoinUpdate) -> Soin:
        update_data = obj_in.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(db_obj, field, value)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, db_obj: Soin) -> Soin:
        db.delete(db_obj)
        db.commit()
        return db_obj


product_crud = CRUDProduct()
soin_crud = CRUDSoin()
