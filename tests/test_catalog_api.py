import pytest
from decimal import Decimal
from fastapi.testclient import TestClient

from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine
from backend.app.main import app
from backend.app.models.enums import ItemKind
from backend.app.services.catalog import get_stock_status, lookup_catalog_item


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def create_product(client: TestClient, name: str = "Paracétamol 500mg", price: float = 2.5, stock: int = 150):
    resp = client.post(
        "/products/",
        json={"name": name, "unit_price": price, "stock": stock, "created_by": "Dr. Smith"},
    )
    assert resp.status_code == 201
    return resp.json()


def create_soin(client: TestClient, name: str = "Consultation générale", category: str = "Consultation", price: float = 50.0):
    resp = client.post(
        "/soins/",
        json={"name": name, "category": category, "unit_price": price, "created_by": "Dr. Martin"},
    )
    assert resp.status_code == 201
    return resp.json()


def test_create_and_get_product():
    client = TestClient(app)
    product = create_product(client)
    resp = client.get(f"/products/{product['id']}")
    assert resp.status_code == 200
    data = resp.json()
    assert data["name"] == "Paracétamol 500mg"
    assert Decimal(str(data["unit_price"])) == Decimal("2.50")
    assert data["stock"] == 150


def test_create_product_rejects_invalid_data():
    client = TestClient(app)
    resp = client.post("/products/", json={"name": "", "unit_price": 0, "stock": -1, "created_by": ""})
    assert resp.status_code == 400
    assert resp.json()["detail"] == [
        "Product name is required",
        "Price must be greater than 0",
        "Stock cannot be negative",
        "Creator is required",
    ]


def test_update_product_validates_merged_values():
    client = TestClient(app)
    product = create_product(client)
    resp = client.put(f"/products/{product['id']}", json={"unit_price": 3.1})
    assert resp.status_code == 200
    assert Decimal(str(resp.json()["unit_price"])) == Decimal("3.10")

    bad = client.put(f"/products/{product['id']}", json={"stock": -5})
    assert bad.status_code == 400


def test_stock_update_low_stock_and_statistics():
    client = TestClient(app)
    a = create_product(client, "A", 10.0, 0)
    create_product(client, "B", 2.0, 5)
    create_product(client, "C", 1.0, 50)

    resp = client.patch(f"/products/{a['id']}/stock", json={"stock": 3})
    assert resp.status_code == 200
    assert resp.json()["stock"] == 3
    assert client.patch(f"/products/{a['id']}/stock", json={"stock": -1}).status_code == 400

    low = client.get("/products/low-stock")
    assert [p["name"] for p in low.json()] == ["A", "B"]

    stats = client.get("/products/statistics").json()
    assert stats["total_products"] == 3
    assert stats["low_stock"] == 2
    assert stats["in_stock"] == 1
    assert stats["out_of_stock"] == 0
    assert Decimal(str(stats["total_value"])) == Decimal("90.00")


def test_get_stock_status_thresholds():
    assert get_stock_status(0) == "Rupture"
    assert get_stock_status(10) == "Stock faible"
    assert get_stock_status(11) == "En stock"


def test_soins_filter_and_search():
    client = TestClient(app)
    create_soin(client)
    create_soin(client, "Radiographie thoracique", "Diagnostic", 70.5)

    resp = client.get("/soins/", params={"category": "Diagnostic"})
    assert [s["name"] for s in resp.json()] == ["Radiographie thoracique"]

    search = client.get("/soins/search", params={"q": "consult"})
    assert [s["name"] for s in search.json()] == ["Consultation générale"]


def test_create_soin_requires_category():
    client = TestClient(app)
    resp = client.post("/soins/", json={"name": "Suivi", "unit_price": 35.0, "created_by": "Dr. Smith"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == ["Soin category is required"]


def test_catalog_lookup_by_kind():
    client = TestClient(app)
    product = create_product(client)
    soin = create_soin(client)

    resp = client.get(f"/catalog/product/{product['id']}")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Paracétamol 500mg"

    resp = client.get(f"/catalog/soin/{soin['id']}")
    assert resp.status_code == 200
    assert Decimal(str(resp.json()["unit_price"])) == Decimal("50.00")

    assert client.get("/catalog/product/999").status_code == 404
    assert client.get("/catalog/bien/1").status_code == 422


def test_lookup_rejects_non_positive_ids():
    db = SessionLocal()
    try:
        assert lookup_catalog_item(db, ItemKind.PRODUCT, 0) is None
        assert lookup_catalog_item(db, ItemKind.SOIN, -3) is None
    finally:
        db.close()


def test_select_copies_current_price_and_name():
    client = TestClient(app)
    soin = create_soin(client)
    line = {"item_id": 0, "item_kind": "product", "quantity": 1, "unit_price": "0", "item_name": ""}

    resp = client.post("/catalog/select", json={"item": line, "kind": "soin", "item_id": soin["id"]})
    assert resp.status_code == 200
    data = resp.json()
    assert data["item_id"] == soin["id"]
    assert data["item_kind"] == "soin"
    assert data["item_name"] == "Consultation générale"
    assert Decimal(str(data["unit_price"])) == Decimal("50.00")

    missing = client.post("/catalog/select", json={"item": line, "kind": "product", "item_id": 42})
    assert missing.status_code == 404
