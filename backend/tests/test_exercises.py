import uuid

from fastapi.testclient import TestClient
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from catalog_admin.main import app
from catalog_admin.models import ExerciseEquipment, ExerciseMovementPattern, ExerciseMuscle
from catalog_admin.repositories import relations

client = TestClient(app)

def post(headers, path, **body):
    r = client.post(path, headers=headers, json=body)
    assert r.status_code == 201, r.text
    return r.json()["id"]

def seed(headers):
    group = post(headers, "/muscle-groups", name="Pierna")
    sub = post(headers, "/muscle-subgroups", name="Anterior", group_id=group)
    return {
        "plane": post(headers, "/planes", name="Sagital"),
        "level": post(headers, "/difficulty-levels", name="Intermedio"),
        "bar": post(headers, "/equipment", name="Barra"),
        "rack": post(headers, "/equipment", name="Rack"),
        "squat": post(headers, "/movement-patterns", name="Sentadilla"),
        "quad": post(headers, "/muscles", name="Cuádriceps", subgroup_id=sub),
        "glute": post(headers, "/muscles", name="Glúteo mayor", subgroup_id=sub),
        "core": post(headers, "/muscles", name="Core"),
    }

def count(db, model, exercise_id):
    return db.execute(
        select(func.count()).select_from(model).where(model.exercise_id == uuid.UUID(exercise_id))
    ).scalar_one()

def create_squat(headers, ids, **extra):
    body = {
        "name_es": "Sentadilla trasera",
        "urlvideo": "https://videos.example.com/back-squat",
        "plane_id": ids["plane"],
        "difficulty_id": ids["level"],
        "equipment_ids": [ids["bar"], ids["rack"]],
        "pattern_ids": [ids["squat"]],
        "muscle_ids": [ids["quad"], ids["glute"]],
        "secondary_muscle_ids": [ids["core"]],
        **extra,
    }
    r = client.post("/exercises", headers=headers, json=body)
    assert r.status_code == 201, r.text
    return r.json()

def test_create_returns_flattened_row(manager_headers):
    ids = seed(manager_headers)
    ex = create_squat(manager_headers, ids)
    uuid.UUID(ex["id"])
    assert ex["name_en"] == "Sentadilla trasera"
    assert ex["has_video"] is True and ex["is_active"] is True
    assert ex["plane_name"] == "Sagital" and ex["difficulty_name"] == "Intermedio"
    assert ex["laterality_name"] == "—" and ex["type_name"] == "—"
    assert ex["equipment"] == ["Barra", "Rack"]
    assert ex["patterns"] == ["Sentadilla"]
    assert ex["primary_muscles"] == ["Cuádriceps", "Glúteo mayor"]
    assert ex["secondary_muscles"] == ["Core"]
    assert ex["muscle_ids"] == [ids["quad"], ids["glute"]]

def test_update_replaces_relations(manager_headers, db):
    ids = seed(manager_headers)
    ex = create_squat(manager_headers, ids)

    r = client.put(f"/exercises/{ex['id']}", headers=manager_headers, json={
        "name_es": "Sentadilla frontal",
        "name_en": "Front squat",
        "equipment_ids": [ids["bar"]],
        "muscle_ids": [ids["quad"], ids["quad"]],
    })
    assert r.status_code == 200, r.text
    row = r.json()
    assert row["name_en"] == "Front squat"
    assert row["equipment_ids"] == [ids["bar"]]
    assert row["muscle_ids"] == [ids["quad"]]
    # lists left out of the payload keep their rows
    assert row["pattern_ids"] == [ids["squat"]]
    assert row["secondary_muscle_ids"] == [ids["core"]]
    # lookups not sent are cleared like any other form field
    assert row["plane_name"] == "—"
    assert count(db, ExerciseMuscle, ex["id"]) == 2

def test_empty_list_clears_relation(manager_headers, db):
    ids = seed(manager_headers)
    ex = create_squat(manager_headers, ids)
    r = client.put(f"/exercises/{ex['id']}", headers=manager_headers,
                   json={"name_es": "Sentadilla trasera", "equipment_ids": []})
    assert r.json()["equipment"] == []
    assert count(db, ExerciseEquipment, ex["id"]) == 0

def test_unknown_relation_id_rejected(manager_headers, db):
    ids = seed(manager_headers)
    r = client.post("/exercises", headers=manager_headers,
                    json={"name_es": "Zancada", "muscle_ids": [ids["quad"], 999]})
    assert r.status_code == 400
    assert r.json()["detail"] == "muscle_ids not found"
    assert client.get("/exercises/all", headers=manager_headers).json() == []

def test_unknown_lookup_rejected(manager_headers):
    r = client.post("/exercises", headers=manager_headers, json={"name_es": "Zancada", "type_id": 5})
    assert r.status_code == 400
    assert r.json()["detail"] == "type_id not found"

def test_form_validation(manager_headers):
    r = client.post("/exercises", headers=manager_headers,
                    json={"name_es": "Z", "urlvideo": "not a url"})
    assert r.status_code == 422
    assert client.get("/exercises/not-a-uuid", headers=manager_headers).status_code == 422
    assert client.get(f"/exercises/{uuid.uuid4()}", headers=manager_headers).status_code == 404

def test_delete_cascades_join_rows(manager_headers, db):
    ids = seed(manager_headers)
    ex = create_squat(manager_headers, ids)
    assert count(db, ExerciseMuscle, ex["id"]) == 3

    r = client.delete(f"/exercises/{ex['id']}", headers=manager_headers)
    assert r.status_code == 204
    assert client.get(f"/exercises/{ex['id']}", headers=manager_headers).status_code == 404
    for model in (ExerciseMuscle, ExerciseEquipment, ExerciseMovementPattern):
        assert count(db, model, ex["id"]) == 0
    # the related catalog rows themselves are untouched
    assert client.get(f"/muscles/{ids['quad']}", headers=manager_headers).status_code == 200

def test_failed_sync_keeps_previous_associations(manager_headers, db, monkeypatch):
    ids = seed(manager_headers)
    ex = create_squat(manager_headers, ids)

    def lost_connection(*args, **kwargs):
        raise OperationalError("INSERT INTO exercise_equipment", {}, Exception("connection lost"))
    monkeypatch.setattr(relations, "insert", lost_connection)

    r = client.put(f"/exercises/{ex['id']}", headers=manager_headers, json={
        "name_es": "Renombrada", "equipment_ids": [ids["rack"]],
    })
    assert r.status_code == 503
    assert r.json() == {"detail": "store unavailable"}

    monkeypatch.undo()
    row = client.get(f"/exercises/{ex['id']}", headers=manager_headers).json()
    assert row["name_es"] == "Sentadilla trasera"
    assert row["equipment_ids"] == [ids["bar"], ids["rack"]]
    assert count(db, ExerciseEquipment, ex["id"]) == 2

def test_search_by_muscle_and_page_size(manager_headers):
    ids = seed(manager_headers)
    create_squat(manager_headers, ids)
    for i in range(1, 17):
        client.post("/exercises", headers=manager_headers, json={"name_es": f"Plancha {i:02d}"})

    page = client.get("/exercises", headers=manager_headers).json()
    assert page["total"] == 17 and page["total_pages"] == 2
    assert len(page["items"]) == 15
    assert page["label"] == "Mostrando 1-15 de 17"

    page = client.get("/exercises", headers=manager_headers, params={"q": "glúteo"}).json()
    assert [e["name_es"] for e in page["items"]] == ["Sentadilla trasera"]
    page = client.get("/exercises", headers=manager_headers, params={"q": "core"}).json()
    assert page["total"] == 1

def test_options_use_spanish_name(viewer_headers, manager_headers):
    client.post("/exercises", headers=manager_headers, json={"name_es": "Remo", "name_en": "Row"})
    opts = client.get("/exercises/options", headers=viewer_headers).json()
    assert [o["name"] for o in opts] == ["Remo"]
