"""
Implementations SQLModel des repositories.

Ce module contient l'implementation concrete de l'interface IParcelStore
definie dans src/core/ports/repositories.py, utilisant SQLModel pour
la persistance SQLite.

Le store :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from src.infrastructure.persistence.repositories.parcel_repository import (
    SQLModelParcelStore,
)

__all__ = [
    "SQLModelParcelStore",
]
