"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour :

ajouter une description détaillée avec les conventions de l'API,

centraliser la personnalisation du Swagger.
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API de suivi des tâches de la semaine (FastAPI + SQLite).\n\n"
            "### Conventions\n"
            "- JSON en camelCase (`dayOfWeek`, `weekDate`, `createdAt`...).\n"
            "- `weekDate` = dimanche de la semaine, format `YYYY-MM-DD`.\n"
            "- `dayOfWeek` = nom du jour en anglais, en minuscules.\n"
            "- Horodatages en UTC ; \"aujourd'hui\" est calculé dans le fuseau configuré.\n"
            "- Les listes renvoient toujours un tableau (éventuellement vide).\n"
        ),
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
