import logging
import os
from typing import Any

from fastapi import FastAPI, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

import activities
import awards
import database
import stats
import students
from errors import TrackerError, parse_id
from schemas import ActivityTemplateCreate, AwardCreate, StudentCreate, StudentUpdate

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

DEVELOPMENT = os.getenv("APP_ENV") == "development"

app = FastAPI(title="Creature Points API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def ok(data: Any = None, message: str | None = None, status_code: int = 200, **extra) -> JSONResponse:
    body = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    body.update(extra)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def fail(status_code: int, message: str, error: Any = None) -> JSONResponse:
    body = {"success": False, "message": message}
    if error is not None:
        body["error"] = error
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


@app.on_event("startup")
def startup_event():
    data_dir = database.ensure_data_dir()
    logger.info(f"Data stored in {data_dir}")


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"{request.method} {request.url.path}")
    return await call_next(request)


@app.exception_handler(TrackerError)
async def tracker_error_handler(request: Request, exc: TrackerError):
    return fail(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return fail(400, "Dados inválidos", exc.errors())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # unknown method on a known path is reported like an unknown path
    if exc.status_code in (404, 405):
        return fail(404, "Endpoint não encontrado")
    return fail(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return fail(500, "Erro interno do servidor", str(exc) if DEVELOPMENT else None)


@app.get("/")
def root():
    return {"message": "Creature Points API running"}


@app.get("/api/students")
def get_students():
    return ok([s.dump() for s in students.list_students()])


@app.post("/api/students")
def create_student(payload: StudentCreate):
    student = students.create_student(payload.name, payload.category)
    return ok(student.dump(), f"Aluno {student.name} cadastrado com sucesso!", status_code=201)


@app.put("/api/students/{student_id}")
def update_student(student_id: str, payload: StudentUpdate | None = None):
    sid = parse_id(student_id, "ID do estudante inválido")
    total_points = payload.total_points if payload else None
    student = students.update_student(sid, total_points)
    return ok(student.dump(), "Estudante atualizado com sucesso!")


@app.delete("/api/students/{student_id}")
def delete_student(student_id: str):
    students.delete_student(parse_id(student_id, "ID do estudante inválido"))
    return ok(message="Estudante excluído com sucesso!")


@app.get("/api/created-activities")
def get_created_activities():
    return ok([a.dump() for a in activities.list_activities()])


@app.post("/api/created-activities")
def create_activity(payload: ActivityTemplateCreate):
    activity = activities.create_activity(payload.name, payload.default_points, payload.description)
    return ok(activity.dump(), f'Atividade "{activity.name}" criada com sucesso!', status_code=201)


@app.delete("/api/created-activities/{activity_id}")
def delete_activity(activity_id: str):
    activities.delete_activity(parse_id(activity_id, "ID da atividade inválido"))
    return ok(message="Atividade excluída com sucesso!")


@app.get("/api/activities")
def get_awards():
    return ok([a.dump() for a in awards.list_awards()])


@app.post("/api/activities")
def award_points(payload: AwardCreate):
    result = awards.award_points(payload.student_id, payload.activity_id, payload.points)
    message = (
        f'Atividade "{result.activity.name}" atribuída para {result.student.name}! '
        f"(+{result.activity.points} pontos)"
    )
    return ok(result.dump(), message, status_code=201)


@app.get("/api/activities/student/{student_id}")
def get_student_awards(student_id: str):
    sid = parse_id(student_id, "ID do estudante inválido")
    return ok([a.dump() for a in awards.list_awards_for_student(sid)])


@app.get("/api/ranking")
def get_ranking(
    category: str | None = None,
    pokemon: str | None = None,
    limit: int = Query(stats.DEFAULT_RANKING_LIMIT, ge=0),
):
    ranked, total = stats.ranking(category or pokemon, limit)
    return ok([s.dump() for s in ranked], total=total)


@app.get("/api/stats")
def get_stats():
    return ok(stats.stats().dump())


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
