"""
➡️ But : Définir la structure des tables de la base (ORM).

Contient les classes héritant de SQLModel (ou Base de SQLAlchemy).

Représente les objets persistés. Ici on représente les propriétés communes de toutes les tables.

Chaque champ = une colonne SQL (avec type, index, clé primaire...).

🔹 Avantages :

Tu manipules des objets Python, pas du SQL brut.

Les valeurs par défaut existent aussi côté SQL (server_default), utile pour les inserts bruts / migrations.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import func
from sqlmodel import SQLModel, Field


def utcnow() -> datetime:
    """Horodatage UTC, toujours avec fuseau."""
    return datetime.now(timezone.utc)


class BaseModelDB(SQLModel, table=False):
    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column_kwargs={"server_default": func.current_timestamp()},
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column_kwargs={"server_default": func.current_timestamp()},
    )
