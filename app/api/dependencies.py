"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Exemples :

get_task_service() : crée un TaskService à partir d’une session DB et du fuseau configuré.

get_now() : horloge injectable (figée dans les tests via app.dependency_overrides).

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Aucun état global : engine et fuseau vivent sur app.state.
"""

from datetime import datetime, timezone, tzinfo

from fastapi import Depends, Request
from sqlmodel import Session

from app.db.session import get_session
from app.db.repositories.tasks import TaskRepository
from app.features.tasks.services import TaskService
from app.features.timezone.services import TimezoneService


def get_now() -> datetime:
    return datetime.now(timezone.utc)


def get_timezone(request: Request) -> tzinfo:
    return request.app.state.tz


# -----------------------------
# Repositories
# -----------------------------
def get_task_repository(session: Session = Depends(get_session)) -> TaskRepository:
    return TaskRepository(session)


# -----------------------------
# Services
# -----------------------------
def get_task_service(
    task_repo: TaskRepository = Depends(get_task_repository),
    tz: tzinfo = Depends(get_timezone),
) -> TaskService:
    return TaskService(repo=task_repo, tz=tz)


def get_timezone_service(tz: tzinfo = Depends(get_timezone)) -> TimezoneService:
    return TimezoneService(tz)
