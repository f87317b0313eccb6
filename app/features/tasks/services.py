"""
➡️ But : Contenir la logique métier : orchestrer le repo, appliquer des règles, gérer les erreurs.

TaskService : vérifie les champs obligatoires, calcule le "bucket" du jour (semaine + jour) dans le fuseau configuré.

Lève des exceptions métier (TaskValidationError, TaskNotFoundError), traduites en HTTP par les routes.

🔹 Avantages :

Code métier découplé du web.

Test unitaire possible sans passer par FastAPI.
"""

import logging
from datetime import datetime, tzinfo
from typing import Sequence

from app.db.models.tasks import Task
from app.db.repositories.tasks import TaskRepository
from app.features.tasks.schemas import TaskCreateIn, TaskUpdateIn
from app.utils.weeks import day_name, week_date

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Title, dayOfWeek, and weekDate are required"


class TaskValidationError(ValueError):
    pass


class TaskNotFoundError(LookupError):
    pass


class TaskService:
    def __init__(self, repo: TaskRepository, tz: tzinfo):
        self.repo = repo
        self.tz = tz

    # -------- Helpers --------

    @staticmethod
    def _require(payload: TaskCreateIn) -> None:
        if not payload.title or not payload.day_of_week or not payload.week_date:
            raise TaskValidationError(REQUIRED_FIELDS_MESSAGE)

    # -------- Reads --------

    def list_all(self) -> Sequence[Task]:
        return self.repo.list_all()

    def list_by_week(self, week: str) -> Sequence[Task]:
        return self.repo.list_by_week(week)

    def list_today(self, now: datetime) -> Sequence[Task]:
        """Tâches du jour courant (dans le fuseau configuré)."""
        week, today = week_date(now, self.tz), day_name(now, self.tz)
        logger.debug("Today bucket: week=%s day=%s", week, today)
        return self.repo.list_by_week_and_day(week, today)

    def list_today_week(self, now: datetime) -> Sequence[Task]:
        return self.repo.list_by_week(week_date(now, self.tz))

    # -------- Writes --------

    def create(self, payload: TaskCreateIn) -> Task:
        self._require(payload)
        task = self.repo.create(
            title=payload.title,
            day_of_week=payload.day_of_week,
            week_date=payload.week_date,
            tags=payload.tags or "",
        )
        logger.info("Created task id=%s week=%s day=%s", task.id, task.week_date, task.day_of_week)
        return task

    def update(self, task_id: int, payload: TaskUpdateIn) -> Task:
        self._require(payload)
        task = self.repo.update(
            task_id,
            title=payload.title,
            completed=payload.completed,
            day_of_week=payload.day_of_week,
            week_date=payload.week_date,
            tags=payload.tags or "",
        )
        if task is None:
            raise TaskNotFoundError("Task not found")
        logger.info("Updated task id=%s completed=%s", task.id, task.completed)
        return task

    def delete(self, task_id: int) -> None:
        if not self.repo.delete(task_id):
            raise TaskNotFoundError("Task not found")
        logger.info("Deleted task id=%s", task_id)
