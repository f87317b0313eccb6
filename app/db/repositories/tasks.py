# app/db/repositories/tasks.py
from typing import Optional, Sequence

from sqlalchemy import update
from sqlmodel import select

from app.db.models.base import utcnow
from app.db.models.tasks import Task
from app.db.repositories.base import BaseRepository


class TaskRepository(BaseRepository[Task]):
    """CRUD Tasks + requêtes par semaine / jour."""
    model = Task

    # ---------- LISTES ----------

    def list_all(self) -> Sequence[Task]:
        """Toutes les tâches, groupées par jour (ordre alphabétique) puis par date de création."""
        stmt = select(Task).order_by(Task.day_of_week, Task.created_at, Task.id)
        return self.session.exec(stmt).all()

    def list_by_week(self, week_date: str) -> Sequence[Task]:
        """Tâches d'une semaine (égalité stricte sur week_date), même ordre que list_all."""
        stmt = (
            select(Task)
            .where(Task.week_date == week_date)
            .order_by(Task.day_of_week, Task.created_at, Task.id)
        )
        return self.session.exec(stmt).all()

    def list_by_week_and_day(self, week_date: str, day_of_week: str) -> Sequence[Task]:
        stmt = (
            select(Task)
            .where(Task.week_date == week_date, Task.day_of_week == day_of_week)
            .order_by(Task.created_at, Task.id)
        )
        return self.session.exec(stmt).all()

    # ---------- ÉCRITURES ----------

    def create(self, *, title: str, day_of_week: str, week_date: str, tags: str) -> Task:
        now = utcnow()
        task = Task(
            title=title,
            completed=False,
            day_of_week=day_of_week,
            week_date=week_date,
            tags=tags,
            created_at=now,
            updated_at=now,
        )
        return self.add(task)

    def update(
        self,
        task_id: int,
        *,
        title: str,
        completed: bool,
        day_of_week: str,
        week_date: str,
        tags: str,
    ) -> Optional[Task]:
        """
        Réécrit tous les champs modifiables en une seule requête
        (UPDATE ... WHERE id = ? RETURNING ...).
        Retourne None si l'id n'existe pas : aucune ligne n'est créée.
        """
        stmt = (
            update(Task)
            .where(Task.id == task_id)
            .values(
                title=title,
                completed=completed,
                day_of_week=day_of_week,
                week_date=week_date,
                tags=tags,
                updated_at=utcnow(),
            )
            .returning(Task)
            .execution_options(populate_existing=True)
        )
        task = self.session.exec(stmt).scalar_one_or_none()
        self.session.commit()
        if task is not None:
            self.session.refresh(task)
        return task

    def delete(self, task_id: int) -> bool:
        return self.delete_by_id(task_id)
