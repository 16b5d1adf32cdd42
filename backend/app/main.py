# Clinic billing & dynamic documents backend entrypoint.

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from backend.app.core.errors import persistence_error_handler
from backend.app.core.logging import configure_logging
from backend.app.core.settings import get_settings
from backend.app.api import catalog
from backend.app.api import products
from backend.app.api import soins
from backend.app.api import invoices
from backend.app.api import document_templates
from backend.app.api import documents
from backend.app.core.dev_seed import ensure_demo_catalog
from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine

settings = get_settings()
configure_logging()

Base.metadata.create_all(bind=engine)

app = FastAPI(title=settings.app_name, version=settings.api_version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(SQLAlchemyError, persistence_error_handler)

app.include_router(catalog.router)
app.include_router(products.router)
app.include_router(soins.router)
app.include_router(invoices.router)
app.include_router(document_templates.router)
app.include_router(documents.router)


@app.get("/")
def read_root():
    return {"app": "Clinic Billing backend", "status": "ok"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.on_event("startup")
def seed_demo_catalog():
    db = SessionLocal()
    try:
        ensure_demo_catalog(db)
    finally:
        db.close()
