from fastapi.testclient import TestClient
from catalog_admin.main import app

client = TestClient(app)

def make(headers, path, **body):
    r = client.post(path, headers=headers, json=body)
    assert r.status_code == 201, r.text
    return r.json()

def seed(headers):
    group = make(headers, "/muscle-groups", name="Espalda")
    sub = make(headers, "/muscle-subgroups", name="Dorsal", group_id=group["id"])
    return {
        "exercise": make(headers, "/exercises", name_es="Dominadas")["id"],
        "muscle": make(headers, "/muscles", name="Dorsal ancho", subgroup_id=sub["id"])["id"],
        "other": make(headers, "/muscles", name="Bíceps braquial")["id"],
        "subgroup": sub["id"],
        "pattern": make(headers, "/movement-patterns", name="Tracción vertical")["id"],
    }

def test_link_row_inlines_names(manager_headers):
    ids = seed(manager_headers)
    link = make(manager_headers, "/exercise-muscles",
                exercise_id=ids["exercise"], muscle_id=ids["muscle"], role="primary")
    assert link["exercise_name"] == "Dominadas"
    assert link["muscle_name"] == "Dorsal ancho"
    assert link["subgroup_name"] == "Dorsal"
    assert link["group_name"] == "Espalda"
    assert link["role"] == "primary"

def test_duplicate_combination_rejected(manager_headers):
    ids = seed(manager_headers)
    body = {"exercise_id": ids["exercise"], "muscle_id": ids["muscle"], "role": "primary"}
    assert client.post("/exercise-muscles", headers=manager_headers, json=body).status_code == 201

    r = client.post("/exercise-muscles", headers=manager_headers, json=body)
    assert r.status_code == 409
    assert r.json()["detail"] == "combination already exists"
    assert len(client.get("/exercise-muscles/all", headers=manager_headers).json()) == 1

    # same pair with the other role is a different combination
    body["role"] = "secondary"
    assert client.post("/exercise-muscles", headers=manager_headers, json=body).status_code == 201

def test_editing_row_to_its_own_triple_is_allowed(manager_headers):
    ids = seed(manager_headers)
    body = {"exercise_id": ids["exercise"], "muscle_id": ids["muscle"], "role": "primary"}
    link = make(manager_headers, "/exercise-muscles", **body)
    r = client.put(f"/exercise-muscles/{link['id']}", headers=manager_headers, json=body)
    assert r.status_code == 200, r.text

def test_editing_into_an_existing_triple_is_rejected(manager_headers):
    ids = seed(manager_headers)
    make(manager_headers, "/exercise-muscles", exercise_id=ids["exercise"], muscle_id=ids["muscle"])
    second = make(manager_headers, "/exercise-muscles", exercise_id=ids["exercise"], muscle_id=ids["other"])
    r = client.put(f"/exercise-muscles/{second['id']}", headers=manager_headers,
                   json={"exercise_id": ids["exercise"], "muscle_id": ids["muscle"], "role": "primary"})
    assert r.status_code == 409
    row = client.get(f"/exercise-muscles/{second['id']}", headers=manager_headers).json()
    assert row["muscle_id"] == ids["other"]

def test_exercise_muscle_search_and_delete(manager_headers):
    ids = seed(manager_headers)
    link = make(manager_headers, "/exercise-muscles",
                exercise_id=ids["exercise"], muscle_id=ids["other"], role="secondary")
    page = client.get("/exercise-muscles", headers=manager_headers, params={"q": "SECOND"}).json()
    assert [r["id"] for r in page["items"]] == [link["id"]]

    assert client.delete(f"/exercise-muscles/{link['id']}", headers=manager_headers).status_code == 204
    assert client.get(f"/exercise-muscles/{link['id']}", headers=manager_headers).status_code == 404

def test_unknown_exercise_rejected(manager_headers):
    ids = seed(manager_headers)
    r = client.post("/exercise-muscles", headers=manager_headers,
                    json={"exercise_id": "00000000-0000-0000-0000-000000000000", "muscle_id": ids["muscle"]})
    assert r.status_code == 400
    assert r.json()["detail"] == "exercise_id not found"

def test_movement_pattern_links(manager_headers):
    ids = seed(manager_headers)
    link = make(manager_headers, "/exercise-movement-patterns",
                exercise_id=ids["exercise"], pattern_id=ids["pattern"])
    assert link["exercise_name"] == "Dominadas"
    assert link["pattern_name"] == "Tracción vertical"

    page = client.get("/exercise-movement-patterns", headers=manager_headers, params={"q": "tracción"}).json()
    assert page["total"] == 1
    # shows up on the exercise row too
    ex = client.get(f"/exercises/{ids['exercise']}", headers=manager_headers).json()
    assert ex["patterns"] == ["Tracción vertical"]

def test_muscle_subgroup_links(manager_headers):
    ids = seed(manager_headers)
    link = make(manager_headers, "/exercise-muscle-subgroups",
                exercise_id=ids["exercise"], subgroup_id=ids["subgroup"])
    assert link["subgroup_name"] == "Dorsal"
    assert link["muscle_group_name"] == "Espalda"

    # deleting the exercise takes its subgroup links with it
    assert client.delete(f"/exercises/{ids['exercise']}", headers=manager_headers).status_code == 204
    assert client.get("/exercise-muscle-subgroups/all", headers=manager_headers).json() == []
