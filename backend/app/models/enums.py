"""Enumerations shared by models, schemas and services."""

from enum import Enum


class ItemKind(str, Enum):
    PRODUCT = "product"
    SOIN = "soin"


class InvoiceStatus(str, Enum):
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    CANCELLED = "cancelled"
    OVERDUE = "overdue"


class SoinCategory(str, Enum):
    CONSULTATION = "Consultation"
    DIAGNOSTIC = "Diagnostic"
    PREVENTIF = "Préventif"
    THERAPEUTIQUE = "Thérapeutique"
    CHIRURGIE = "Chirurgie"
    REEDUCATION = "Rééducation"
    URGENCE = "Urgence"
    SUIVI = "Suivi"


class FieldType(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    TEXTAREA = "textarea"
    DATE = "date"
    SELECT = "select"
    CHECKBOX = "checkbox"
