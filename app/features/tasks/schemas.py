"""
➡️ But : Définir les formats d’entrée/sortie de l’API (couche validation).

TaskCreateIn → corps de requête POST

TaskUpdateIn → corps PUT (réécriture complète, pas de patch partiel)

TaskOut → réponse de l’API

Le JSON est en camelCase (dayOfWeek, weekDate, createdAt...), les attributs Python en snake_case.

Les champs obligatoires ne sont PAS vérifiés ici : un champ vide doit donner un 400
(TaskService), pas le 422 de pydantic.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field as PydField, field_validator
from pydantic.alias_generators import to_camel

_camel = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------- IN ----------

class TaskCreateIn(BaseModel):
    model_config = _camel

    title: Optional[str] = PydField(None, examples=["Buy milk"])
    day_of_week: Optional[str] = PydField(None, examples=["monday"])
    week_date: Optional[str] = PydField(None, examples=["2024-01-07"])
    tags: Optional[str] = PydField(None, examples=["errand"])


class TaskUpdateIn(TaskCreateIn):
    completed: bool = PydField(False, examples=[True])


# ---------- OUT ----------

class TaskOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    title: str
    completed: bool
    day_of_week: str
    week_date: str
    tags: str
    created_at: datetime
    updated_at: datetime

    @field_validator("tags", mode="before")
    @classmethod
    def _tags_not_null(cls, v):
        return v or ""

    @field_validator("week_date", mode="before")
    @classmethod
    def _week_not_null(cls, v):
        return v or ""

    @field_validator("created_at", "updated_at")
    @classmethod
    def _as_utc(cls, v: datetime) -> datetime:
        # stocké en UTC naïf dans SQLite
        return v.replace(tzinfo=timezone.utc) if v.tzinfo is None else v


class MessageOut(BaseModel):
    message: str
