from sqlalchemy import false
from sqlmodel import Field

from .base import BaseModelDB


class Task(BaseModelDB, table=True):
    """Tâche rangée dans un "bucket" (semaine, jour)."""

    __tablename__ = "tasks"

    title: str = Field(description="Intitulé de la tâche")
    completed: bool = Field(default=False, sa_column_kwargs={"server_default": false()})

    # Bucket : dimanche de la semaine (YYYY-MM-DD) + nom du jour en minuscules.
    # Aucune cohérence imposée entre les deux.
    day_of_week: str = Field(description="Jour de la semaine, ex: 'monday'")
    week_date: str = Field(index=True, description="Dimanche de la semaine, YYYY-MM-DD")

    # Liste séparée par des virgules, stockée telle quelle
    tags: str = Field(default="", sa_column_kwargs={"server_default": ""})
