"""Soin model: a billable clinical service."""

from sqlalchemy import Column, DateTime, Integer, Numeric, String

from backend.app.core.time import utc_now
from backend.app.db.base_class import Base


class Soin(Base):
    __tablename__ = "soins"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    category = Column(String(50), nullable=False, index=True)
    unit_price = Column(Numeric(10, 2), nullable=False, default=0.00)
    created_by = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
