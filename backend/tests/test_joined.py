from types import SimpleNamespace

from catalog_admin.models import Muscle, MuscleGroup, MuscleSubgroup
from catalog_admin.repositories.joined import JoinSpec, flatten, load_joined, normalize_relation

def test_normalize_relation_shapes():
    rec = object()
    assert normalize_relation(rec) is rec
    assert normalize_relation([rec]) is rec
    assert normalize_relation((rec,)) is rec
    assert normalize_relation([]) is None
    assert normalize_relation(None) is None

def test_flatten_uses_fallback_on_missing_hop():
    group = SimpleNamespace(name="Pierna")
    with_list = SimpleNamespace(id=1, name="Cuádriceps", subgroup=[SimpleNamespace(name="Anterior", group=group)])
    orphan = SimpleNamespace(id=2, name="Suelto", subgroup=None)
    joins = (JoinSpec("subgroup", fallback="—"), JoinSpec("subgroup.group", label="muscle_group_name", fallback="—"))

    assert flatten(with_list, ("id", "name"), joins) == {
        "id": 1, "name": "Cuádriceps", "subgroup_name": "Anterior", "muscle_group_name": "Pierna",
    }
    assert flatten(orphan, ("id", "name"), joins) == {
        "id": 2, "name": "Suelto", "subgroup_name": "—", "muscle_group_name": "—",
    }

def test_load_joined_orders_and_inlines(db):
    g = MuscleGroup(name="Pierna")
    sg = MuscleSubgroup(name="Anterior", group=g)
    db.add_all([Muscle(name="Sartorio", subgroup=sg), Muscle(name="Aductor"), Muscle(name="Cuádriceps", subgroup=sg)])
    db.commit()

    rows = load_joined(
        db, Muscle,
        columns=("id", "name"),
        joins=(JoinSpec("subgroup"), JoinSpec("subgroup.group", label="muscle_group_name")),
        order_by="name",
    )
    assert [r["name"] for r in rows] == ["Aductor", "Cuádriceps", "Sartorio"]
    assert rows[0]["subgroup_name"] == "" and rows[0]["muscle_group_name"] == ""
    assert rows[1]["muscle_group_name"] == "Pierna"
