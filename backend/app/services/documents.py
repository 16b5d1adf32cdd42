"""Clinical document rules and persistence."""

import json
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from backend.app.models.document import Document
from backend.app.schemas.document import DocumentCreate, DocumentUpdate
from backend.app.services.document_templates import template_sections
from backend.app.services.field_keys import get_field_value, iter_field_keys, migrate_document_data

logger = logging.getLogger(__name__)


def is_present(value: Any) -> bool:
    """``None`` and ``""`` are absent; ``0`` and ``False`` are real answers."""
    return value is not None and value != ""


def validate_document_data(form: DocumentCreate) -> List[str]:
    errors: List[str] = []
    if not form.template_id:
        errors.append("Document template is required")
    if not form.patient_cin.strip():
        errors.append("Patient CIN is required")
    if not form.created_by.strip():
        errors.append("Creator is required")
    if not form.data:
        errors.append("Document data is required")
    return errors


def validate_document_against_template(data: Dict[str, Any], template) -> List[str]:
    """Return one error per required field without a value, in section then field order."""
    errors: List[str] = []
    for key, _section, field in iter_field_keys(template.id, template_sections(template)):
        if not field.required:
            continue
        if not is_present(get_field_value(data, key, field.name)):
            errors.append(f'Field "{field.name}" is required')
    return errors


def normalize_document_data(data: Dict[str, Any], template) -> Dict[str, Any]:
    return migrate_document_data(template.id, template_sections(template), data)


def create_document(db: Session, form: DocumentCreate, template) -> Document:
    document = Document(
        template_id=template.id,
        patient_cin=form.patient_cin.strip(),
        data=normalize_document_data(form.data, template),
        created_by=form.created_by.strip(),
    )
    db.add(document)
    db.commit()
    db.refresh(document)
    logger.info("Created document %s from template %s for %s", document.id, template.id, document.patient_cin)
    return document


def update_document(db: Session, document: Document, form: DocumentUpdate, template) -> Document:
    document.patient_cin = form.patient_cin.strip()
    document.data = normalize_document_data(form.data, template)
    document.created_by = form.created_by.strip()
    db.commit()
    db.refresh(document)
    logger.info("Updated document %s", document.id)
    return document


def delete_document(db: Session, document: Document) -> Document:
    db.delete(document)
    db.commit()
    logger.info("Deleted document %s", document.id)
    return document


def get_document(db: Session, document_id: int) -> Optional[Document]:
    return db.query(Document).filter(Document.id == document_id).first()


def list_documents(
    db: Session,
    patient_cin: Optional[str] = None,
    template_id: Optional[int] = None,
) -> List[Document]:
    query = db.query(Document)
    if patient_cin:
        query = query.filter(Document.patient_cin == patient_cin)
    if template_id:
        query = query.filter(Document.template_id == template_id)
    return query.order_by(Document.created_at.desc(), Document.id.desc()).all()


def search_documents(db: Session, query: str, patient_cin: Optional[str] = None) -> List[Document]:
    needle = query.lower()
    return [
        document
        for document in list_documents(db, patient_cin=patient_cin)
        if needle in document.created_by.lower()
        or needle in json.dumps(document.data, ensure_ascii=False, default=str).lower()
    ]
