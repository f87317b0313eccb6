"""
➡️ But : assembler toutes les pièces du puzzle.

create_app() crée l’instance FastAPI et configure :

CORS (origines locales de dev + APP_URL optionnelle)

titre, version, tags

schéma OpenAPI personnalisé

Inclut les routers (ex : /api/tasks).

Au démarrage (lifespan) : logs, fuseau horaire, base SQLite (tables + migrations).

Monte le front-end (SPA) en dernier, pour attraper toutes les autres routes.

🔹 Avantages :

Centralise la configuration du serveur HTTP.

Point unique d’exécution : uvicorn app.main:app --reload.
"""

import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import Settings, settings as default_settings
from app.core.logging_setup import setup_logging
from app.core.openapi import custom_openapi
from app.db.session import build_engine, init_db
from app.utils.static_files import SPAStaticFiles
from app.utils.weeks import load_timezone, timezone_name

from app.api.routers import tasks, timezone

import uvicorn

logger = logging.getLogger(__name__)


def create_app(settings: Settings = default_settings) -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup : toute erreur ici est fatale (pas de mode dégradé)
        tz = load_timezone(settings.TIMEZONE)
        logger.info("Using timezone: %s", timezone_name(tz))

        engine = build_engine(settings.DATABASE_URL, echo=(settings.LOG_LEVEL.upper() == "DEBUG"))
        init_db(engine, tz)
        logger.info("Database ready: %s", engine.url)

        app.state.tz = tz
        app.state.engine = engine
        logger.info("CORS allowed origins: %s", settings.cors_origins)
        logger.info("=== Server ready ===")
        yield
        # Shutdown
        engine.dispose()
        logger.info("Database connections closed")

    app = FastAPI(
        title=settings.APP_NAME,
        version="1.0.0",
        openapi_tags=[
            {"name": "tasks", "description": "Tâches de la semaine (CRUD, buckets semaine / jour)"},
            {"name": "timezone", "description": "Fuseau horaire configuré (lecture seule)"},
        ],
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "X-Requested-With", "Upgrade", "Connection"],
    )

    # Request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method, request.url.path, response.status_code, duration_ms,
        )
        return response

    # Corps JSON invalide → 400 (et non 422)
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning("Invalid request body on %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Invalid request body"},
        )

    # Routers
    app.include_router(tasks.router, prefix=settings.API_PREFIX)
    app.include_router(timezone.router, prefix=settings.API_PREFIX)

    # Génération du schéma OpenAPI custom (facultatif, mais propre)
    app.openapi = lambda: custom_openapi(app)

    # Front-end : monté en dernier (catch-all)
    static_dir = Path(settings.STATIC_DIR)
    if static_dir.is_dir():
        app.mount("/", SPAStaticFiles(directory=str(static_dir)), name="spa")
    else:
        logger.warning("Static directory %s not found, front-end not served", static_dir)

    return app


app = create_app()

# Démarrage
if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=(default_settings.ENV == "dev"),
    ) # http://localhost:8080
