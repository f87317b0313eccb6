"""
➡️ But : Définir les endpoints de l’API des tâches.

C’est la couche la plus proche du web :

Réceptionne les requêtes HTTP (GET, POST, PUT, DELETE)

Appelle le service correspondant

Traduit les exceptions métier en codes HTTP (400 / 404 / 500)

Retourne les schémas de sortie (response_model, JSON camelCase)
"""

import logging
import re
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from app.api.dependencies import get_now, get_task_service
from app.features.tasks.schemas import MessageOut, TaskCreateIn, TaskOut, TaskUpdateIn
from app.features.tasks.services import TaskNotFoundError, TaskService, TaskValidationError

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    responses={404: {"description": "Not Found"}},
)

# -------- Helpers --------

_TASK_ID_RE = re.compile(r"[+-]?[0-9]+")
_SQLITE_INT_MIN, _SQLITE_INT_MAX = -(2**63), 2**63 - 1


def _parse_task_id(raw: str) -> int:
    # int() seul accepte "1_0", " 5" ou des chiffres non ASCII
    if _TASK_ID_RE.fullmatch(raw):
        task_id = int(raw)
        if _SQLITE_INT_MIN <= task_id <= _SQLITE_INT_MAX:
            return task_id
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid task ID")


def _storage_error(e: SQLAlchemyError) -> HTTPException:
    # message brut renvoyé tel quel
    logger.error("Database error: %s", e)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


# -----------------------------
# Lists
# -----------------------------
@router.get(
    "",
    summary="Lister toutes les tâches",
    description="Triées par jour de la semaine puis par date de création.",
    response_model=List[TaskOut],
)
def list_tasks(svc: TaskService = Depends(get_task_service)):
    try:
        return svc.list_all()
    except SQLAlchemyError as e:
        raise _storage_error(e)


@router.get(
    "/week/{week_date}",
    summary="Lister les tâches d'une semaine",
    description="week_date = dimanche de la semaine (YYYY-MM-DD), égalité stricte.",
    response_model=List[TaskOut],
)
def list_week(week_date: str, svc: TaskService = Depends(get_task_service)):
    try:
        return svc.list_by_week(week_date)
    except SQLAlchemyError as e:
        raise _storage_error(e)


@router.get(
    "/today",
    summary="Lister les tâches du jour",
    response_model=List[TaskOut],
)
def list_today(
    now: datetime = Depends(get_now),
    svc: TaskService = Depends(get_task_service),
):
    try:
        return svc.list_today(now)
    except SQLAlchemyError as e:
        raise _storage_error(e)


@router.get(
    "/today/week",
    summary="Lister les tâches de la semaine courante",
    response_model=List[TaskOut],
)
def list_today_week(
    now: datetime = Depends(get_now),
    svc: TaskService = Depends(get_task_service),
):
    try:
        return svc.list_today_week(now)
    except SQLAlchemyError as e:
        raise _storage_error(e)


# -----------------------------
# Writes
# -----------------------------
@router.post(
    "",
    summary="Créer une tâche",
    status_code=status.HTTP_201_CREATED,
    response_model=TaskOut,
)
def create_task(payload: TaskCreateIn, svc: TaskService = Depends(get_task_service)):
    try:
        return svc.create(payload)
    except TaskValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except SQLAlchemyError as e:
        raise _storage_error(e)


@router.put(
    "/{task_id}",
    summary="Réécrire une tâche",
    description="Tous les champs modifiables sont remplacés (pas de patch partiel).",
    response_model=TaskOut,
)
def update_task(task_id: str, payload: TaskUpdateIn, svc: TaskService = Depends(get_task_service)):
    id_ = _parse_task_id(task_id)
    try:
        return svc.update(id_, payload)
    except TaskValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except TaskNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except SQLAlchemyError as e:
        raise _storage_error(e)


@router.delete(
    "/{task_id}",
    summary="Supprimer une tâche",
    response_model=MessageOut,
)
def delete_task(task_id: str, svc: TaskService = Depends(get_task_service)):
    id_ = _parse_task_id(task_id)
    try:
        svc.delete(id_)
    except TaskNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except SQLAlchemyError as e:
        raise _storage_error(e)
    return MessageOut(message="Task deleted successfully")
