import pytest

import activities
from errors import Conflict, InvalidArgument, NotFound


def test_create_activity():
    activity = activities.create_activity(" Homework ", 10, "  weekly  ")
    assert activity.name == "Homework"
    assert activity.default_points == 10
    assert activity.description == "weekly"
    assert [a.dump() for a in activities.list_activities()] == [activity.dump()]


def test_description_defaults_to_empty():
    assert activities.create_activity("Quiz", 5).description == ""


@pytest.mark.parametrize("points", [0, -1, 101, None])
def test_create_activity_rejects_bad_points(points):
    with pytest.raises(InvalidArgument):
        activities.create_activity("Quiz", points)


def test_create_activity_requires_name():
    with pytest.raises(InvalidArgument):
        activities.create_activity("", 10)


def test_bounds_are_inclusive():
    activities.create_activity("Low", 1)
    activities.create_activity("High", 100)
    assert len(activities.list_activities()) == 2


def test_duplicate_activity_name():
    activities.create_activity("Reading", 10)
    with pytest.raises(Conflict):
        activities.create_activity("READING", 20)


def test_delete_activity():
    keep = activities.create_activity("Keep", 10)
    drop = activities.create_activity("Drop", 10)
    activities.delete_activity(drop.id)
    assert [a.id for a in activities.list_activities()] == [keep.id]
    with pytest.raises(NotFound):
        activities.delete_activity(drop.id)
