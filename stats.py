import math
from collections import Counter

from activities import load_activities
from awards import level_for, load_awards
from schemas import Stats, Student
from students import load_students

DEFAULT_RANKING_LIMIT = 5


def ranking(category: str | None = None, limit: int = DEFAULT_RANKING_LIMIT) -> tuple[list[Student], int]:
    """Students sorted by points, highest first, plus the count before truncation."""
    students = load_students()
    if category and category != "all":
        students = [s for s in students if s.category == category]

    # sorted() is stable, so ties keep file order
    ranked = sorted(students, key=lambda s: s.total_points, reverse=True)
    return ranked[:limit], len(students)


def stats() -> Stats:
    students = load_students()
    total_points = sum(s.total_points for s in students)
    # round half up
    average = math.floor(total_points / len(students) + 0.5) if students else 0

    return Stats(
        total_students=len(students),
        total_activities=len(load_activities()),
        total_activities_assigned=len(load_awards()),
        total_points=total_points,
        average_points=average,
        category_distribution=dict(Counter(s.category for s in students)),
        level_distribution=dict(Counter(level_for(s.total_points) for s in students)),
    )
