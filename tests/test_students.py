import pytest

import students
from errors import Conflict, InvalidArgument, NotFound


def test_create_student_defaults():
    student = students.create_student("  Ash  ", "Fire")
    assert student.name == "Ash"
    assert student.category == "Fire"
    assert student.total_points == 0
    assert student.created_at.endswith("Z")
    assert student.updated_at is None
    assert [s.dump() for s in students.list_students()] == [student.dump()]


@pytest.mark.parametrize("name,category", [(None, "Fire"), ("Ash", None), ("", "Fire"), ("   ", "Fire")])
def test_create_student_requires_fields(name, category):
    with pytest.raises(InvalidArgument):
        students.create_student(name, category)


def test_duplicate_name_is_case_insensitive_after_trimming():
    students.create_student("Misty", "Water")
    with pytest.raises(Conflict):
        students.create_student("  mISTY ", "Grass")
    assert len(students.list_students()) == 1


def test_ids_are_unique():
    created = [students.create_student(f"Student {i}", "Normal") for i in range(20)]
    assert len({s.id for s in created}) == 20


def test_update_student_overwrites_points():
    student = students.create_student("Brock", "Rock")
    updated = students.update_student(student.id, 42)
    assert updated.total_points == 42
    assert updated.updated_at is not None
    assert students.list_students()[0].total_points == 42


def test_update_without_points_leaves_record_alone():
    student = students.create_student("Brock", "Rock")
    updated = students.update_student(student.id)
    assert updated.total_points == 0
    assert updated.updated_at is None


def test_update_unknown_student():
    with pytest.raises(NotFound):
        students.update_student(123, 10)


def test_delete_removes_exactly_one_and_keeps_order():
    a = students.create_student("A", "Fire")
    b = students.create_student("B", "Water")
    c = students.create_student("C", "Grass")
    students.delete_student(b.id)
    assert [s.id for s in students.list_students()] == [a.id, c.id]


def test_delete_unknown_student():
    students.create_student("A", "Fire")
    with pytest.raises(NotFound):
        students.delete_student(1)
    assert len(students.list_students()) == 1


def test_legacy_pokemon_type_records_are_read(data_dir):
    import database

    database.save_documents(database.STUDENTS, [
        {"id": 7, "name": "Gary", "pokemonType": "Psychic", "totalPoints": 5, "createdAt": "x", "house": "Red"},
    ])
    student = students.list_students()[0]
    assert student.category == "Psychic"

    students.update_student(7, 6)
    stored = database.get_documents(database.STUDENTS)[0]
    assert stored["category"] == "Psychic"
    assert stored["house"] == "Red"
    assert stored["totalPoints"] == 6


def test_duplicate_name_uses_casefold():
    students.create_student("Straße", "Rock")
    with pytest.raises(Conflict):
        students.create_student("STRASSE", "Rock")


def test_unreadable_rows_are_skipped(data_dir):
    import database

    database.save_documents(database.STUDENTS, [
        {"id": 1, "name": "Ok", "category": "Fire", "totalPoints": None, "createdAt": "x"},
        {"id": "two", "name": "Broken"},
        "not a record",
        {"id": 3, "name": "Also ok", "category": "Water", "totalPoints": 12, "createdAt": "x"},
    ])
    loaded = students.list_students()
    assert [s.id for s in loaded] == [1, 3]
    assert loaded[0].total_points == 0
