"""Clinical document endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.core.errors import raise_for_validation_errors
from backend.app.db.session import get_db
from backend.app.schemas.document import DocumentCreate, DocumentRead, DocumentUpdate
from backend.app.schemas.document_template import DocumentForm
from backend.app.services.document_templates import build_document_form, get_document_template
from backend.app.services.documents import (
    create_document,
    delete_document,
    get_document,
    list_documents,
    search_documents,
    update_document,
    validate_document_against_template,
    validate_document_data,
)

router = APIRouter(prefix="/documents", tags=["documents"])


def _get_document_or_404(db: Session, document_id: int):
    document = get_document(db, document_id)
    if not document:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document not found")
    return document


def _get_template_or_404(db: Session, template_id: int):
    template = get_document_template(db, template_id)
    if not template:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document template not found")
    return template


@router.post("/", response_model=DocumentRead, status_code=status.HTTP_201_CREATED)
async def create_new_document(document_in: DocumentCreate, db: Session = Depends(get_db)):
    raise_for_validation_errors(validate_document_data(document_in))
    template = _get_template_or_404(db, document_in.template_id)
    raise_for_validation_errors(validate_document_against_template(document_in.data, template))
    return create_document(db, document_in, template)


@router.get("/", response_model=List[DocumentRead])
async def list_all_documents(
    patient_cin: Optional[str] = None,
    template_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    return list_documents(db, patient_cin=patient_cin, template_id=template_id)


@router.get("/search", response_model=List[DocumentRead])
async def search_all_documents(q: str = "", patient_cin: Optional[str] = None, db: Session = Depends(get_db)):
    return search_documents(db, q, patient_cin=patient_cin)


@router.get("/{document_id}", response_model=DocumentRead)
async def get_single_document(document_id: int, db: Session = Depends(get_db)):
    return _get_document_or_404(db, document_id)


@router.get("/{document_id}/form", response_model=DocumentForm)
async def get_document_form(document_id: int, db: Session = Depends(get_db)):
    document = _get_document_or_404(db, document_id)
    return build_document_form(document.template, document.data)


@router.put("/{document_id}", response_model=DocumentRead)
async def update_existing_document(document_id: int, document_in: DocumentUpdate, db: Session = Depends(get_db)):
    document = _get_document_or_404(db, document_id)
    errors = validate_document_data(
        DocumentCreate(template_id=document.template_id, **document_in.model_dump())
    )
    raise_for_validation_errors(errors)
    template = _get_template_or_404(db, document.template_id)
    raise_for_validation_errors(validate_document_against_template(document_in.data, template))
    return update_document(db, document, document_in, template)


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_document(document_id: int, db: Session = Depends(get_db)):
    document = _get_document_or_404(db, document_id)
    delete_document(db, document)
