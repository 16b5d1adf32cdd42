import logging
import os
from decimal import Decimal

from sqlalchemy.orm import Session

from backend.app.models.document_template import DocumentTemplate
from backend.app.models.enums import SoinCategory
from backend.app.models.product import Product
from backend.app.models.soin import Soin

logger = logging.getLogger(__name__)

DEMO_CREATOR = "Dr. Smith"
DEMO_PRODUCTS = [
    ("Paracétamol 500mg", Decimal("2.50"), 150),
    ("Ibuprofène 400mg", Decimal("8.90"), 45),
    ("Vitamine D3", Decimal("15.75"), 25),
    ("Oméga 3", Decimal("12.30"), 8),
]
DEMO_SOINS = [
    ("Consultation générale", SoinCategory.CONSULTATION, Decimal("50.00")),
    ("Radiographie thoracique", SoinCategory.DIAGNOSTIC, Decimal("70.50")),
    ("Vaccination antigrippale", SoinCategory.PREVENTIF, Decimal("25.00")),
    ("Séance de kinésithérapie", SoinCategory.REEDUCATION, Decimal("45.00")),
]
DEMO_TEMPLATE_SECTIONS = [
    {
        "title": "Informations Générales",
        "fields": [
            {"name": "Date de consultation", "type": "date", "required": True, "options": None},
            {"name": "Motif de consultation", "type": "textarea", "required": True, "options": None},
            {"name": "Durée (minutes)", "type": "number", "required": False, "options": None},
        ],
    },
    {
        "title": "Examen Clinique",
        "fields": [
            {"name": "Tension artérielle", "type": "text", "required": False, "options": None},
            {"name": "Poids (kg)", "type": "number", "required": False, "options": None},
            {"name": "Température (°C)", "type": "number", "required": False, "options": None},
        ],
    },
]


def ensure_demo_catalog(db: Session) -> None:
    """
    Seed an empty local database with a small catalog and a consultation template.
    Skips execution when running under pytest to avoid altering test expectations.
    """
    if os.getenv("PYTEST_CURRENT_TEST"):
        return

    created = False
    if db.query(Product).first() is None:
        for name, price, stock in DEMO_PRODUCTS:
            db.add(Product(name=name, unit_price=price, stock=stock, created_by=DEMO_CREATOR))
        created = True
    if db.query(Soin).first() is None:
        for name, category, price in DEMO_SOINS:
            db.add(Soin(name=name, category=category.value, unit_price=price, created_by=DEMO_CREATOR))
        created = True
    if db.query(DocumentTemplate).first() is None:
        db.add(
            DocumentTemplate(
                name="Consultation Médicale Standard",
                sections=DEMO_TEMPLATE_SECTIONS,
                created_by=DEMO_CREATOR,
            )
        )
        created = True

    if created:
        db.commit()
        logger.info("Seeded demo catalog data")
