"""Document template endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.core.errors import raise_for_validation_errors
from backend.app.db.session import get_db
from backend.app.schemas.document_template import (
    DocumentForm,
    DocumentTemplateCreate,
    DocumentTemplateRead,
    DocumentTemplateUpdate,
)
from backend.app.services.document_templates import (
    build_document_form,
    create_document_template,
    delete_document_template,
    get_document_template,
    list_document_templates,
    search_document_templates,
    template_in_use,
    update_document_template,
    validate_document_template,
)

router = APIRouter(prefix="/document-templates", tags=["document_templates"])


def _get_template_or_404(db: Session, template_id: int):
    template = get_document_template(db, template_id)
    if not template:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document template not found")
    return template


@router.post("/", response_model=DocumentTemplateRead, status_code=status.HTTP_201_CREATED)
async def create_template(template_in: DocumentTemplateCreate, db: Session = Depends(get_db)):
    raise_for_validation_errors(validate_document_template(template_in))
    return create_document_template(db, template_in)


@router.get("/", response_model=List[DocumentTemplateRead])
async def list_templates(db: Session = Depends(get_db)):
    return list_document_templates(db)


@router.get("/search", response_model=List[DocumentTemplateRead])
async def search_templates(q: str = "", db: Session = Depends(get_db)):
    return search_document_templates(db, q)


@router.get("/{template_id}", response_model=DocumentTemplateRead)
async def get_template(template_id: int, db: Session = Depends(get_db)):
    return _get_template_or_404(db, template_id)


@router.get("/{template_id}/form", response_model=DocumentForm)
async def get_blank_form(template_id: int, db: Session = Depends(get_db)):
    return build_document_form(_get_template_or_404(db, template_id))


@router.put("/{template_id}", response_model=DocumentTemplateRead)
async def update_template(template_id: int, template_in: DocumentTemplateUpdate, db: Session = Depends(get_db)):
    template = _get_template_or_404(db, template_id)
    raise_for_validation_errors(validate_document_template(template_in))
    return update_document_template(db, template, template_in)


@router.delete("/{template_id}", response_model=DocumentTemplateRead)
async def delete_template(template_id: int, db: Session = Depends(get_db)):
    template = _get_template_or_404(db, template_id)
    if template_in_use(db, template):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Template is used by existing documents")
    return delete_document_template(db, template)
