"""
Award ledger.

Awards are append-only. Recording one adds its points to the student's
total, which is how students level up ("evolve").
"""
import logging

from activities import MAX_POINTS, MIN_POINTS, find_activity, load_activities
from database import ACTIVITIES, get_documents, next_id, save_documents
from errors import InvalidArgument, NotFound
from schemas import AwardRecord, AwardResult, parse_documents, short_date, utc_now_iso
from students import find_student, load_students, save_students

logger = logging.getLogger(__name__)

POINTS_PER_LEVEL = 100
MAX_LEVEL = 2


def level_for(total_points: int) -> int:
    return min(MAX_LEVEL, total_points // POINTS_PER_LEVEL)


def load_awards() -> list[AwardRecord]:
    return parse_documents(AwardRecord, get_documents(ACTIVITIES))


def list_awards() -> list[AwardRecord]:
    return load_awards()


def list_awards_for_student(student_id: int) -> list[AwardRecord]:
    return [a for a in load_awards() if a.student_id == student_id]


def award_points(
    student_id: int | None,
    activity_id: int | None,
    points: int | None,
) -> AwardResult:
    if not student_id or not activity_id or not points:
        raise InvalidArgument("ID do estudante, ID da atividade e pontos são obrigatórios")
    if points < MIN_POINTS or points > MAX_POINTS:
        raise InvalidArgument("Pontuação deve estar entre 1 e 100")

    students = load_students()
    templates = load_activities()
    awards = load_awards()

    student = find_student(students, student_id)
    if student is None:
        raise NotFound("Estudante não encontrado")
    template = find_activity(templates, activity_id)
    if template is None:
        raise NotFound("Atividade não encontrada")

    old_level = level_for(student.total_points)
    student.total_points += points
    student.updated_at = utc_now_iso()
    new_level = level_for(student.total_points)

    record = AwardRecord(
        id=next_id([a.dump() for a in awards]),
        student_id=student_id,
        activity_id=activity_id,
        name=template.name,
        points=points,
        date=short_date(),
        created_at=utc_now_iso(),
    )
    awards.append(record)

    # two separate files; a crash between the writes leaves them out of step
    save_students(students)
    save_documents(ACTIVITIES, [a.dump() for a in awards])

    evolved = new_level > old_level
    logger.info(
        f"Awarded {points} points to student {student_id} for '{template.name}'"
        + (f", evolved to level {new_level}" if evolved else "")
    )
    return AwardResult(activity=record, student=student, evolved=evolved, new_level=new_level)
