"""
➡️ But : Servir le front-end (SPA pré-construite) avec repli sur index.html.

- fichier existant            → servi tel quel
- asset manquant (.js, .css…) → 404 normal
- toute autre route inconnue  → index.html (le routing côté client prend le relais)
"""

import logging

from starlette.exceptions import HTTPException
from starlette.responses import Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

logger = logging.getLogger(__name__)

INDEX_FILE = "index.html"

STATIC_EXTENSIONS = (
    ".js", ".css", ".png", ".jpg", ".jpeg", ".gif", ".svg", ".ico",
    ".woff", ".woff2", ".ttf", ".eot",
)


def is_static_asset(path: str) -> bool:
    path = path.lstrip("/")
    # _app/ = assets générés par SvelteKit
    return path.endswith(STATIC_EXTENSIONS) or path.startswith("_app/")


class SPAStaticFiles(StaticFiles):
    def __init__(self, *, directory: str, **kwargs):
        super().__init__(directory=directory, html=True, **kwargs)

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            return await super().get_response(path, scope)
        except HTTPException as e:
            if e.status_code != 404 or is_static_asset(path):
                raise
            logger.info("SPA fallback: %r not found, serving %s", path, INDEX_FILE)
            return await super().get_response(INDEX_FILE, scope)
