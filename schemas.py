"""
Data Schemas for the Creature Points tracker

Each Pydantic model corresponds to a JSON document collection.
Fields are snake_case in Python and camelCase on disk and on the wire.
"""
import logging
from datetime import datetime, timezone
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


def utc_now_iso() -> str:
    """ISO-8601 UTC timestamp with milliseconds, e.g. 2024-05-01T12:00:00.000Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def short_date() -> str:
    return datetime.now().strftime("%d/%m/%Y")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def dump(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class Document(CamelModel):
    # unknown keys found on disk are written back untouched
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class Student(Document):
    id: int = Field(..., description="Generated identifier")
    name: str = Field(..., description="Display name, unique case-insensitively")
    category: str = Field(
        ...,
        validation_alias=AliasChoices("category", "pokemonType"),
        description="Free-form creature type",
    )
    total_points: int = Field(0, description="Cumulative points")
    created_at: str = Field(..., description="ISO-8601 creation timestamp")
    updated_at: str | None = Field(None, description="ISO-8601 timestamp of the last points change")

    @field_validator("total_points", mode="before")
    @classmethod
    def null_points_as_zero(cls, value):
        return 0 if value is None else value


class ActivityTemplate(Document):
    id: int
    name: str
    default_points: int = Field(..., description="Suggested points, 1 to 100")
    description: str = ""
    created_at: str


class AwardRecord(Document):
    id: int
    student_id: int
    activity_id: int
    name: str = Field(..., description="Template name at award time")
    points: int = Field(..., description="Points awarded, 1 to 100")
    date: str = Field(..., description="dd/mm/yyyy")
    created_at: str


class AwardResult(CamelModel):
    activity: AwardRecord
    student: Student
    evolved: bool
    new_level: int


class Stats(CamelModel):
    total_students: int
    total_activities: int
    total_activities_assigned: int
    total_points: int
    average_points: int
    category_distribution: dict[str, int]
    level_distribution: dict[int, int]


# Fields are optional so that missing values reach the handlers and get the
# domain error message instead of a generic validation error.

class StudentCreate(CamelModel):
    name: str | None = None
    category: str | None = Field(None, validation_alias=AliasChoices("category", "pokemonType"))


class StudentUpdate(CamelModel):
    total_points: int | None = None


class ActivityTemplateCreate(CamelModel):
    name: str | None = None
    default_points: int | None = None
    description: str | None = None


class AwardCreate(CamelModel):
    student_id: int | None = None
    activity_id: int | None = None
    points: int | None = None


def parse_documents(model: type[Document], documents: list[dict[str, Any]]) -> list[Any]:
    """Validate stored records, skipping any the model rejects."""
    parsed = []
    for doc in documents:
        try:
            parsed.append(model.model_validate(doc))
        except ValidationError as e:
            logger.warning(f"Skipping unreadable {model.__name__} record: {e.error_count()} error(s) in {doc!r}")
    return parsed
