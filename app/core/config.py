"""
➡️ But : Centraliser tous les paramètres configurables (nom d’app, chemin DB, fuseau horaire, CORS, etc.)

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from app.core.config import settings
print(settings.TIMEZONE)

🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (dev / prod / test) : create_app(Settings(...)) en test.
"""

from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Weekly-Tasks"
    ENV: str = "dev"  # dev | prod | test
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # -----------------------------
    # DB
    # -----------------------------
    SQLITE_PATH: str = "storage/tasks.db"  # fichier SQLite, le dossier est créé au démarrage
    # Si tu veux forcer une URL différente, définis DATABASE_URL dans l'env.
    DATABASE_URL: Optional[str] = None

    # -----------------------------
    # Semaines / fuseau horaire
    # -----------------------------
    # Identifiant IANA ; repli sur UTC s'il est introuvable
    TIMEZONE: str = "America/Los_Angeles"

    # -----------------------------
    # HTTP
    # -----------------------------
    API_PREFIX: str = "/api"
    STATIC_DIR: str = "static"  # bundle SPA pré-construit

    # CORS : origines locales de dev + une origine optionnelle fournie par l'opérateur
    CORS_DEV_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:5174",
        "http://localhost:8080",
    ]
    APP_URL: Optional[str] = None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    # -----------------------------
    # Post-process values
    # -----------------------------
    def model_post_init(self, __context): # appelée automatiquement
        # DATABASE_URL par défaut depuis SQLITE_PATH si non fourni
        if not self.DATABASE_URL:
            object.__setattr__(self, "DATABASE_URL", f"sqlite:///{self.SQLITE_PATH}")

    @property
    def cors_origins(self) -> List[str]:
        origins = list(self.CORS_DEV_ORIGINS)
        if self.APP_URL and self.APP_URL not in origins:
            origins.append(self.APP_URL)
        return origins


# Instance globale importable partout
settings = Settings()
