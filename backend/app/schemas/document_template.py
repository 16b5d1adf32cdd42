"""Document template schemas."""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict


class DocumentField(BaseModel):
    name: str = ""
    type: str = ""
    required: bool = False
    options: Optional[List[str]] = None


class DocumentSection(BaseModel):
    title: str = ""
    fields: List[DocumentField] = []


class DocumentTemplateBase(BaseModel):
    name: str = ""
    sections: List[DocumentSection] = []
    created_by: str = ""


class DocumentTemplateCreate(DocumentTemplateBase):
    pass


class DocumentTemplateUpdate(DocumentTemplateBase):
    pass


class DocumentTemplateRead(DocumentTemplateBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: Optional[datetime] = None


class FieldEditor(BaseModel):
    """Describes the input control used to edit one field."""

    control: str
    input_type: Optional[str] = None
    value: Any = None
    options: List[str] = []
    multiline: bool = False


class FormField(BaseModel):
    key: str
    name: str
    type: str
    required: bool
    editor: FieldEditor


class FormSection(BaseModel):
    title: str
    fields: List[FormField]


class DocumentForm(BaseModel):
    template_id: int
    template_name: str
    sections: List[FormSection]
