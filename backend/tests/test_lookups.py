from fastapi.testclient import TestClient
from catalog_admin.main import app

client = TestClient(app)

def test_reads_need_a_token():
    r = client.get("/equipment")
    assert r.status_code == 401

def test_lookup_crud(manager_headers):
    r = client.post("/equipment", headers=manager_headers, json={"name": "  Barra olímpica "})
    assert r.status_code == 201, r.text
    bar = r.json()
    assert bar["name"] == "Barra olímpica" and bar["id"]

    r = client.put(f"/equipment/{bar['id']}", headers=manager_headers, json={"name": "Barra"})
    assert r.status_code == 200 and r.json() == {"id": bar["id"], "name": "Barra"}

    assert client.get(f"/equipment/{bar['id']}", headers=manager_headers).json()["name"] == "Barra"

    r = client.delete(f"/equipment/{bar['id']}", headers=manager_headers)
    assert r.status_code == 204
    assert client.get(f"/equipment/{bar['id']}", headers=manager_headers).status_code == 404

def test_name_validation(manager_headers):
    r = client.post("/planes", headers=manager_headers, json={"name": " a "})
    assert r.status_code == 422

def test_unknown_ids_are_404(manager_headers):
    assert client.put("/planes/999", headers=manager_headers, json={"name": "Sagital"}).status_code == 404
    assert client.delete("/planes/999", headers=manager_headers).status_code == 404

def test_table_page_and_label(viewer_headers, manager_headers):
    for i in range(1, 24):
        client.post("/movement-patterns", headers=manager_headers, json={"name": f"Patrón {i:02d}"})

    page = client.get("/movement-patterns", headers=viewer_headers).json()
    assert page["total"] == 23 and page["total_pages"] == 3
    assert page["label"] == "Mostrando 1-10 de 23"
    assert [p["name"] for p in page["items"]][:2] == ["Patrón 01", "Patrón 02"]

    page = client.get("/movement-patterns", headers=viewer_headers, params={"page": 9}).json()
    assert page["page"] == 3 and page["label"] == "Mostrando 21-23 de 23"

    page = client.get("/movement-patterns", headers=viewer_headers, params={"q": "patrón 1", "page": 2}).json()
    assert page["page"] == 1
    assert page["label"] == "Mostrando 1-10 de 10"

    assert len(client.get("/movement-patterns/all", headers=viewer_headers).json()) == 23

def test_options_ordered_by_name(viewer_headers, manager_headers):
    for name in ("Transversal", "Frontal", "Sagital"):
        client.post("/planes", headers=manager_headers, json={"name": name})
    opts = client.get("/planes/options", headers=viewer_headers).json()
    assert [o["name"] for o in opts] == ["Frontal", "Sagital", "Transversal"]

def test_viewer_cannot_write(viewer_headers):
    r = client.post("/lateralities", headers=viewer_headers, json={"name": "Unilateral"})
    assert r.status_code == 403
    assert r.json()["detail"] == "Insufficient role"

def test_subcapability_needs_existing_capability(manager_headers):
    r = client.post("/physical-subcapabilities", headers=manager_headers,
                    json={"name": "Fuerza máxima", "capability_id": 42})
    assert r.status_code == 400
    assert r.json()["detail"] == "capability_id not found"

def test_training_method_joins_subcapability(manager_headers):
    cap = client.post("/physical-capabilities", headers=manager_headers, json={"name": "Fuerza"}).json()
    sub = client.post("/physical-subcapabilities", headers=manager_headers,
                      json={"name": "Hipertrofia", "capability_id": cap["id"]}).json()
    assert sub["capability_name"] == "Fuerza"

    r = client.post("/training-methods", headers=manager_headers,
                    json={"name": "Series descendentes", "description": "   ", "subcapability_id": sub["id"]})
    assert r.status_code == 201, r.text
    method = r.json()
    assert method["description"] is None
    assert method["subcapability_name"] == "Hipertrofia"

    page = client.get("/training-methods", headers=manager_headers, params={"q": "hiper"}).json()
    assert [m["id"] for m in page["items"]] == [method["id"]]

def test_delete_blocked_while_referenced(manager_headers):
    cap = client.post("/physical-capabilities", headers=manager_headers, json={"name": "Resistencia"}).json()
    client.post("/physical-subcapabilities", headers=manager_headers,
                json={"name": "Aeróbica", "capability_id": cap["id"]})
    r = client.delete(f"/physical-capabilities/{cap['id']}", headers=manager_headers)
    assert r.status_code == 409
    assert client.get(f"/physical-capabilities/{cap['id']}", headers=manager_headers).status_code == 200
