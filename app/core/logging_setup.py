"""
➡️ But : Configurer les logs de l'application une seule fois, au démarrage.

Un seul handler console (stderr), format horodaté, niveau pris dans settings.LOG_LEVEL.

Les modules utilisent simplement :

logger = logging.getLogger(__name__)
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | int = logging.INFO) -> None:
    """
    Configure le logger racine.
    Appelée depuis create_app() ; idempotente (retire les handlers existants).
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    # Pas de doublons si create_app() est appelée plusieurs fois (tests)
    for h in list(root.handlers):
        if getattr(h, "_weekly_tasks", False):
            root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    handler._weekly_tasks = True  # type: ignore[attr-defined]
    root.addHandler(handler)

    # SQL verbeux seulement si on le demande explicitement
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
