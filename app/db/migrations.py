"""
➡️ But : Mettre à niveau une base existante sans la recréer (migrations additives).

run_migrations() : ajoute les colonnes manquantes de la table tasks puis remplit les anciennes lignes.

- week_date absente → ajoutée, lignes NULL = semaine courante (calculée au démarrage)
- tags absente      → ajoutée, lignes NULL = ''

Idempotent : à lancer à chaque démarrage, après la création de la table.
"""

import logging
from datetime import datetime, timezone, tzinfo
from typing import Optional

from sqlalchemy import inspect, text
from sqlalchemy.engine import Connection, Engine

from app.utils.weeks import week_date

logger = logging.getLogger(__name__)

TABLE = "tasks"


def _columns(conn: Connection) -> set[str]:
    return {c["name"] for c in inspect(conn).get_columns(TABLE)}


def _add_week_date(conn: Connection, default_week: str) -> None:
    conn.execute(text(f"ALTER TABLE {TABLE} ADD COLUMN week_date TEXT"))
    res = conn.execute(
        text(f"UPDATE {TABLE} SET week_date = :week WHERE week_date IS NULL"),
        {"week": default_week},
    )
    logger.info("Migration: added week_date, backfilled %s row(s) with %s", res.rowcount, default_week)


def _add_tags(conn: Connection) -> None:
    conn.execute(text(f"ALTER TABLE {TABLE} ADD COLUMN tags TEXT"))
    res = conn.execute(text(f"UPDATE {TABLE} SET tags = '' WHERE tags IS NULL"))
    logger.info("Migration: added tags, backfilled %s row(s) with ''", res.rowcount)


def run_migrations(engine: Engine, tz: tzinfo, now: Optional[datetime] = None) -> None:
    now = now or datetime.now(timezone.utc)

    with engine.begin() as conn:
        cols = _columns(conn)

        if "week_date" not in cols:
            _add_week_date(conn, week_date(now, tz))
        else:
            logger.debug("week_date column already exists, nothing to migrate")

        if "tags" not in cols:
            _add_tags(conn)
        else:
            logger.debug("tags column already exists, nothing to migrate")

        # create_all() ne crée pas les index d'une table déjà existante
        conn.execute(text(f"CREATE INDEX IF NOT EXISTS ix_{TABLE}_week_date ON {TABLE} (week_date)"))
