"""
➡️ But : Configurer la base SQLite et gérer les sessions de base de données.

build_engine() : connexion à la base (sqlite:///storage/tasks.db par défaut).

init_db() : crée le dossier de stockage, les tables SQLModel, puis applique les migrations.

get_session() : dépendance FastAPI qui ouvre une session sur l'engine de l'application, la fournit aux routes, puis la ferme proprement.

🔹 Avantages :

Un seul endroit pour gérer les connexions DB.

Un engine par application (app.state.engine) : chaque test a sa propre base.
"""

import logging
from datetime import datetime, tzinfo
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, Session, create_engine

# Import all models for creating all tables
from app.db.models.tasks import Task  # noqa: F401
from app.db.migrations import run_migrations

logger = logging.getLogger(__name__)


def build_engine(url: str, *, echo: bool = False) -> Engine:
    assert url, "DATABASE_URL must be set"

    is_sqlite = url.startswith("sqlite:")

    connect_args: Dict[str, Any] = {}
    if is_sqlite:
        # Requis pour SQLite quand utilisé dans un app serveur (multi-threads)
        connect_args["check_same_thread"] = False

    return create_engine(
        url,
        echo=echo,
        connect_args=connect_args,
        pool_pre_ping=not is_sqlite,  # ping utile pour Postgres/MySQL ; inutile pour SQLite
    )


def ensure_storage_dir(engine: Engine) -> None:
    """Crée le dossier du fichier SQLite s'il n'existe pas (erreur fatale sinon)."""
    url = engine.url
    if not url.drivername.startswith("sqlite"):
        return
    database = url.database
    if not database or database == ":memory:":
        return
    Path(database).expanduser().parent.mkdir(parents=True, exist_ok=True)


def init_db(engine: Engine, tz: tzinfo, now: Optional[datetime] = None) -> None:
    """
    Crée les tables si elles n'existent pas, puis ajoute les colonnes manquantes.
    Toute erreur remonte : pas de démarrage en mode dégradé.
    """
    ensure_storage_dir(engine)
    SQLModel.metadata.create_all(engine)
    logger.info("Tasks table created/verified")
    run_migrations(engine, tz, now=now)


def get_session(request: Request) -> Iterator[Session]:
    """
    Dépendance FastAPI : fournit une session par requête.
    Utilisation :
        def route(..., session: Session = Depends(get_session)):
            ...
    """
    with Session(request.app.state.engine) as session:
        yield session
