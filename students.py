import logging

from database import STUDENTS, get_documents, next_id, save_documents
from errors import Conflict, InvalidArgument, NotFound
from schemas import Student, parse_documents, utc_now_iso

logger = logging.getLogger(__name__)


def load_students() -> list[Student]:
    return parse_documents(Student, get_documents(STUDENTS))


def save_students(students: list[Student]) -> None:
    save_documents(STUDENTS, [s.dump() for s in students])


def find_student(students: list[Student], student_id: int) -> Student | None:
    return next((s for s in students if s.id == student_id), None)


def list_students() -> list[Student]:
    return load_students()


def create_student(name: str | None, category: str | None) -> Student:
    name = (name or "").strip()
    if not name or not category:
        raise InvalidArgument("Nome e tipo de Pokémon são obrigatórios")

    students = load_students()
    if any(s.name.strip().casefold() == name.casefold() for s in students):
        raise Conflict("Aluno já cadastrado")

    student = Student(
        id=next_id([s.dump() for s in students]),
        name=name,
        category=category,
        total_points=0,
        created_at=utc_now_iso(),
    )
    students.append(student)
    save_students(students)
    logger.info(f"Created student {student.id} ({student.name})")
    return student


def update_student(student_id: int, total_points: int | None = None) -> Student:
    students = load_students()
    student = find_student(students, student_id)
    if student is None:
        raise NotFound("Estudante não encontrado")

    if total_points is not None:
        student.total_points = total_points
        student.updated_at = utc_now_iso()

    save_students(students)
    logger.info(f"Updated student {student_id}")
    return student


def delete_student(student_id: int) -> None:
    students = load_students()
    remaining = [s for s in students if s.id != student_id]
    if len(remaining) == len(students):
        raise NotFound("Estudante não encontrado")

    save_students(remaining)
    logger.info(f"Deleted student {student_id}")
