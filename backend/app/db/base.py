from backend.app.db.base_class import Base

# Import models to register metadata for Base.metadata.create_all in tests
from backend.app.models.product import Product  # noqa: F401
from backend.app.models.soin import Soin  # noqa: F401
from backend.app.models.invoice import Invoice  # noqa: F401
from backend.app.models.invoice_item import InvoiceItem  # noqa: F401
from backend.app.models.document_template import DocumentTemplate  # noqa: F401
from backend.app.models.document import Document  # noqa: F401
