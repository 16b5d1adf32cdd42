"""Document template rules: schema validation and field editor descriptors."""

import logging
import math
from typing import Any, List, Optional

from sqlalchemy.orm import Session

from backend.app.models.document import Document
from backend.app.models.document_template import DocumentTemplate
from backend.app.models.enums import FieldType
from backend.app.schemas.document_template import (
    DocumentField,
    DocumentForm,
    DocumentSection,
    DocumentTemplateCreate,
    DocumentTemplateUpdate,
    FieldEditor,
    FormField,
    FormSection,
)
from backend.app.services.field_keys import MISSING, compute_field_key, get_field_value

logger = logging.getLogger(__name__)

FIELD_TYPES = {field_type.value for field_type in FieldType}


def validate_document_template(form: DocumentTemplateCreate) -> List[str]:
    errors: List[str] = []

    if not form.name.strip():
        errors.append("Template name is required")
    if not form.created_by.strip():
        errors.append("Creator is required")

    if not form.sections:
        errors.append("At least one section is required")
        return errors

    for section_index, section in enumerate(form.sections, start=1):
        if not section.title.strip():
            errors.append(f"Section {section_index} title is required")
        if not section.fields:
            errors.append(f'Section "{section.title}" must contain at least one field')
            continue
        for field_index, field in enumerate(section.fields, start=1):
            if not field.name.strip():
                errors.append(f'Field {field_index} in "{section.title}" must have a name')
            if field.type not in FIELD_TYPES:
                errors.append(f'Field "{field.name}" in "{section.title}" must have a valid type')
            elif field.type == FieldType.SELECT.value and not field.options:
                errors.append(f'Field "{field.name}" of type "select" must have options')
    return errors


def template_sections(template) -> List[DocumentSection]:
    """Return a template's sections as schema objects, whether stored as JSON or already parsed."""
    return [
        section if isinstance(section, DocumentSection) else DocumentSection.model_validate(section)
        for section in template.sections or []
    ]


def _parse_number(value: Any) -> Any:
    if isinstance(value, bool) or value is None:
        return MISSING
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else MISSING
    try:
        number = float(str(value).strip())
    except ValueError:
        return MISSING
    if not math.isfinite(number):
        return MISSING
    return int(number) if number.is_integer() and "." not in str(value) else number


def describe_field_editor(field: DocumentField, current_value: Any) -> FieldEditor:
    """Map a field type to the control used to edit it and the value it should show."""
    field_type = FieldType(field.type)
    text_value = MISSING if current_value is None else current_value

    if field_type is FieldType.TEXT:
        return FieldEditor(control="input", input_type="text", value=str(text_value))
    if field_type is FieldType.NUMBER:
        return FieldEditor(control="input", input_type="number", value=_parse_number(current_value))
    if field_type is FieldType.TEXTAREA:
        return FieldEditor(control="textarea", value=str(text_value), multiline=True)
    if field_type is FieldType.DATE:
        return FieldEditor(control="input", input_type="date", value=str(text_value)[:10])
    if field_type is FieldType.SELECT:
        options = list(field.options or [])
        return FieldEditor(
            control="select",
            value=current_value if current_value in options else MISSING,
            options=options,
        )
    if field_type is FieldType.CHECKBOX:
        return FieldEditor(control="checkbox", input_type="checkbox", value=bool(current_value))
    raise ValueError(f"Unhandled field type: {field.type}")


def build_document_form(template, data: Optional[dict] = None) -> DocumentForm:
    """Lay out a template's fields with their keys, stored values and editors."""
    data = data or {}
    form_sections: List[FormSection] = []
    for section_index, section in enumerate(template_sections(template)):
        fields = []
        for field_index, field in enumerate(section.fields):
            key = compute_field_key(template.id, section_index, field_index)
            value = get_field_value(data, key, field.name)
            fields.append(
                FormField(
                    key=key,
                    name=field.name,
                    type=field.type,
                    required=field.required,
                    editor=describe_field_editor(field, value),
                )
            )
        form_sections.append(FormSection(title=section.title, fields=fields))
    return DocumentForm(template_id=template.id, template_name=template.name, sections=form_sections)


def create_document_template(db: Session, form: DocumentTemplateCreate) -> DocumentTemplate:
    template = DocumentTemplate(
        name=form.name.strip(),
        sections=[section.model_dump() for section in form.sections],
        created_by=form.created_by.strip(),
    )
    db.add(template)
    db.commit()
    db.refresh(template)
    logger.info("Created document template %s (%s)", template.id, template.name)
    return template


def update_document_template(db: Session, template: DocumentTemplate, form: DocumentTemplateUpdate) -> DocumentTemplate:
    template.name = form.name.strip()
    template.sections = [section.model_dump() for section in form.sections]
    template.created_by = form.created_by.strip()
    db.commit()
    db.refresh(template)
    logger.info("Updated document template %s", template.id)
    return template


def get_document_template(db: Session, template_id: int) -> Optional[DocumentTemplate]:
    return db.query(DocumentTemplate).filter(DocumentTemplate.id == template_id).first()


def list_document_templates(db: Session) -> List[DocumentTemplate]:
    return db.query(DocumentTemplate).order_by(DocumentTemplate.id.asc()).all()


def search_document_templates(db: Session, query: str) -> List[DocumentTemplate]:
    needle = query.lower()
    return [
        template
        for template in list_document_templates(db)
        if needle in template.name.lower() or needle in template.created_by.lower()
    ]


def template_in_use(db: Session, template: DocumentTemplate) -> bool:
    return db.query(Document).filter(Document.template_id == template.id).first() is not None


def delete_document_template(db: Session, template: DocumentTemplate) -> DocumentTemplate:
    db.delete(template)
    db.commit()
    logger.info("Deleted document template %s", template.id)
    return template
