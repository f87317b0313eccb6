from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import delete
from sqlmodel import SQLModel, Session

# Type générique pour le modèle (Task, ...)
ModelT = TypeVar("ModelT", bound=SQLModel)


class BaseRepository(Generic[ModelT]):
    """
    Repository de base pour les opérations CRUD standards.

    👉 Ne contient aucune logique métier.
    👉 Chaque méthode = une transaction (commit immédiat), pas de transaction multi-requêtes.
    👉 Les repositories concrets définissent `model = MaClasseSQLModel`.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    # ---------- READ ----------

    def get(self, id_: Any) -> Optional[ModelT]:
        """Retourne un enregistrement par son identifiant, ou None."""
        return self.session.get(self.model, id_)

    # ---------- CREATE ----------

    def add(self, entity: ModelT) -> ModelT:
        """
        Persiste un nouvel enregistrement puis le relit :
        l'id et les valeurs par défaut de la base font foi.
        """
        self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        return entity

    # ---------- DELETE ----------

    def delete_by_id(self, id_: Any) -> bool:
        """Suppression directe en SQL. False si aucune ligne ne correspond."""
        result = self.session.exec(delete(self.model).where(self.model.id == id_))  # type: ignore[attr-defined]
        self.session.commit()
        return result.rowcount > 0
