"""Document schemas."""

from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class DocumentCreate(BaseModel):
    template_id: int = 0
    patient_cin: str = ""
    data: Dict[str, Any] = {}
    created_by: str = ""


class DocumentUpdate(BaseModel):
    # The template of an existing document is fixed; only the data may change
    patient_cin: str = ""
    data: Dict[str, Any] = {}
    created_by: str = ""


class DocumentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    template_id: int
    patient_cin: str
    data: Dict[str, Any]
    created_by: str
    created_at: datetime
