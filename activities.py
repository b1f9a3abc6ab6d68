"""Activity catalog: reusable templates that awards are made from."""
import logging

from database import CREATED_ACTIVITIES, get_documents, next_id, save_documents
from errors import Conflict, InvalidArgument, NotFound
from schemas import ActivityTemplate, parse_documents, utc_now_iso

logger = logging.getLogger(__name__)

MIN_POINTS = 1
MAX_POINTS = 100


def load_activities() -> list[ActivityTemplate]:
    return parse_documents(ActivityTemplate, get_documents(CREATED_ACTIVITIES))


def find_activity(activities: list[ActivityTemplate], activity_id: int) -> ActivityTemplate | None:
    return next((a for a in activities if a.id == activity_id), None)


def list_activities() -> list[ActivityTemplate]:
    return load_activities()


def create_activity(
    name: str | None,
    default_points: int | None,
    description: str | None = None,
) -> ActivityTemplate:
    name = (name or "").strip()
    if not name or not default_points:
        raise InvalidArgument("Nome e pontuação padrão são obrigatórios")
    if default_points < MIN_POINTS or default_points > MAX_POINTS:
        raise InvalidArgument("Pontuação deve estar entre 1 e 100")

    activities = load_activities()
    if any(a.name.strip().casefold() == name.casefold() for a in activities):
        raise Conflict("Atividade já existe")

    activity = ActivityTemplate(
        id=next_id([a.dump() for a in activities]),
        name=name,
        default_points=default_points,
        description=(description or "").strip(),
        created_at=utc_now_iso(),
    )
    activities.append(activity)
    save_documents(CREATED_ACTIVITIES, [a.dump() for a in activities])
    logger.info(f"Created activity template {activity.id} ({activity.name})")
    return activity


def delete_activity(activity_id: int) -> None:
    activities = load_activities()
    remaining = [a for a in activities if a.id != activity_id]
    if len(remaining) == len(activities):
        raise NotFound("Atividade não encontrada")

    save_documents(CREATED_ACTIVITIES, [a.dump() for a in remaining])
    logger.info(f"Deleted activity template {activity_id}")
