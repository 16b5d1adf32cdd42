import pytest
from fastapi.testclient import TestClient

from backend.app.db.base import Base
from backend.app.db.session import engine
from backend.app.main import app


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


TEMPLATE = {
    "name": "Suivi Post-Opératoire",
    "created_by": "Dr. Dubois",
    "sections": [
        {
            "title": "Détails de l'Intervention",
            "fields": [
                {"name": "Type d'intervention", "type": "text", "required": True},
                {"name": "Statut", "type": "select", "required": True, "options": ["Urgent", "Normal"]},
            ],
        },
        {
            "title": "État de Guérison",
            "fields": [
                {"name": "Niveau de douleur", "type": "number", "required": True},
                {"name": "Complications", "type": "checkbox", "required": True},
            ],
        },
    ],
}


def create_template(client: TestClient, **overrides):
    payload = {**TEMPLATE, **overrides}
    resp = client.post("/document-templates/", json=payload)
    assert resp.status_code == 201
    return resp.json()


def complete_data(template_id: int):
    return {
        f"fld:{template_id}:0:0": "Arthroscopie du genou",
        f"fld:{template_id}:0:1": "Normal",
        f"fld:{template_id}:1:0": 0,
        f"fld:{template_id}:1:1": False,
    }


def create_document(client: TestClient, template_id: int, data=None, patient_cin: str = "BE345678"):
    resp = client.post(
        "/documents/",
        json={
            "template_id": template_id,
            "patient_cin": patient_cin,
            "data": complete_data(template_id) if data is None else data,
            "created_by": "Dr. Dubois",
        },
    )
    return resp


def test_template_crud_and_validation():
    client = TestClient(app)
    template = create_template(client)
    assert template["sections"][0]["fields"][1]["options"] == ["Urgent", "Normal"]

    bad = client.post("/document-templates/", json={"name": "", "created_by": "Dr. Smith", "sections": []})
    assert bad.status_code == 400
    assert bad.json()["detail"] == ["Template name is required", "At least one section is required"]

    renamed = client.put(f"/document-templates/{template['id']}", json={**TEMPLATE, "name": "Suivi"})
    assert renamed.status_code == 200
    assert renamed.json()["name"] == "Suivi"

    search = client.get("/document-templates/search", params={"q": "dubois"})
    assert [t["id"] for t in search.json()] == [template["id"]]

    assert client.delete(f"/document-templates/{template['id']}").status_code == 200
    assert client.get(f"/document-templates/{template['id']}").status_code == 404


def test_zero_and_false_satisfy_required_fields():
    client = TestClient(app)
    template = create_template(client)
    resp = create_document(client, template["id"])
    assert resp.status_code == 201
    assert resp.json()["data"][f"fld:{template['id']}:1:0"] == 0
    assert resp.json()["data"][f"fld:{template['id']}:1:1"] is False


def test_missing_required_fields_are_reported_in_order():
    client = TestClient(app)
    template = create_template(client)
    data = {f"fld:{template['id']}:0:0": "", f"fld:{template['id']}:1:0": None}
    resp = create_document(client, template["id"], data=data)
    assert resp.status_code == 400
    assert resp.json()["detail"] == [
        'Field "Type d\'intervention" is required',
        'Field "Statut" is required',
        'Field "Niveau de douleur" is required',
        'Field "Complications" is required',
    ]
    assert client.get("/documents/").json() == []


def test_unknown_template_returns_404():
    client = TestClient(app)
    resp = create_document(client, 999, data={"Motif": "Contrôle"})
    assert resp.status_code == 404


def test_legacy_name_keys_are_migrated_on_write():
    client = TestClient(app)
    template = create_template(client)
    legacy = {
        "Type d'intervention": "Arthroscopie",
        "Statut": "Urgent",
        "Niveau de douleur": 3,
        "Complications": True,
    }
    resp = create_document(client, template["id"], data=legacy)
    assert resp.status_code == 201
    data = resp.json()["data"]
    assert data == {
        f"fld:{template['id']}:0:0": "Arthroscopie",
        f"fld:{template['id']}:0:1": "Urgent",
        f"fld:{template['id']}:1:0": 3,
        f"fld:{template['id']}:1:1": True,
    }


def test_update_keeps_template_and_replaces_data():
    client = TestClient(app)
    template = create_template(client)
    other = create_template(client, name="Autre")
    document = create_document(client, template["id"]).json()

    new_data = {**complete_data(template["id"]), f"fld:{template['id']}:0:1": "Urgent"}
    resp = client.put(
        f"/documents/{document['id']}",
        json={"template_id": other["id"], "patient_cin": "BE345678", "data": new_data, "created_by": "Dr. Laurent"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["template_id"] == template["id"]
    assert data["created_by"] == "Dr. Laurent"
    assert data["data"][f"fld:{template['id']}:0:1"] == "Urgent"

    incomplete = client.put(
        f"/documents/{document['id']}",
        json={"patient_cin": "BE345678", "data": {}, "created_by": "Dr. Laurent"},
    )
    assert incomplete.status_code == 400
    assert incomplete.json()["detail"] == ["Document data is required"]

    missing_fields = client.put(
        f"/documents/{document['id']}",
        json={"patient_cin": "BE345678", "data": {"autre": "x"}, "created_by": "Dr. Laurent"},
    )
    assert missing_fields.status_code == 400
    assert len(missing_fields.json()["detail"]) == 4


def test_document_form_shows_keys_and_editors():
    client = TestClient(app)
    template = create_template(client)
    document = create_document(client, template["id"]).json()

    resp = client.get(f"/documents/{document['id']}/form")
    assert resp.status_code == 200
    form = resp.json()
    statut = form["sections"][0]["fields"][1]
    assert statut["key"] == f"fld:{template['id']}:0:1"
    assert statut["editor"]["control"] == "select"
    assert statut["editor"]["value"] == "Normal"
    douleur = form["sections"][1]["fields"][0]
    assert douleur["editor"]["input_type"] == "number"
    assert douleur["editor"]["value"] == 0

    blank = client.get(f"/document-templates/{template['id']}/form").json()
    assert blank["sections"][0]["fields"][0]["editor"]["value"] == ""


def test_list_search_and_delete_documents():
    client = TestClient(app)
    template = create_template(client)
    first = create_document(client, template["id"]).json()
    create_document(client, template["id"], patient_cin="BE123456")

    by_patient = client.get("/documents/", params={"patient_cin": "BE123456"}).json()
    assert len(by_patient) == 1
    by_template = client.get("/documents/", params={"template_id": template["id"]}).json()
    assert len(by_template) == 2

    found = client.get("/documents/search", params={"q": "arthroscopie", "patient_cin": "BE345678"}).json()
    assert [doc["id"] for doc in found] == [first["id"]]

    assert client.delete(f"/document-templates/{template['id']}").status_code == 400

    assert client.delete(f"/documents/{first['id']}").status_code == 204
    assert client.get(f"/documents/{first['id']}").status_code == 404
