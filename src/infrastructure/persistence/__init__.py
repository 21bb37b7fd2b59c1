"""
Module de persistance SQLite pour ParcelTrack.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Creation de l'engine, initialisation du schema
- models.py : Modele SQLModel representant la table parcel

Le modele ici est un adapter de persistance, distinct de l'entite de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans le
store (repositories/).

Usage:
    from src.infrastructure.persistence import create_db_engine, init_db

    engine = create_db_engine("sqlite:///tracker.db")
    init_db(engine)  # Cree la table si necessaire
"""

from src.infrastructure.persistence.database import (
    create_db_engine,
    init_db,
)
from src.infrastructure.persistence.models import ParcelModel

__all__ = [
    "create_db_engine",
    "init_db",
    "ParcelModel",
]
