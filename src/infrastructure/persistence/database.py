"""
Configuration de la base de donnees pour ParcelTrack.

Ce module fournit :
- Creation de l'engine a partir de l'URL configuree
- Fonction d'initialisation de la table parcel

Aucun engine global : le container cree l'engine une fois et le passe
explicitement aux sessions, elles-memes passees au store.

Les echecs (repertoire impossible a creer, fichier illisible, base
verrouillee) sont remontes sous forme de StorageError.
"""

from pathlib import Path

from loguru import logger
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from src.core.errors import StorageError


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Cree l'engine SQLAlchemy pour l'URL donnee.

    Pour un fichier SQLite, le repertoire parent est cree si necessaire.
    Une base SQLite en memoire utilise StaticPool afin que toutes les
    sessions partagent la meme connexion (et donc les memes donnees).

    Args :
        database_url : URL SQLAlchemy (ex: sqlite:///tracker.db)
        echo : Journalise les requetes SQL emises

    Retourne :
        L'engine configure

    Raises :
        StorageError : URL invalide ou repertoire parent impossible a creer
    """
    try:
        return _build_engine(database_url, echo)
    except (SQLAlchemyError, OSError) as exc:
        logger.error("Engine impossible a creer", url=database_url, error=str(exc))
        raise StorageError(f"base de donnees {database_url} inutilisable : {exc}") from exc


def _build_engine(database_url: str, echo: bool) -> Engine:
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=echo)

    if database_url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    # Creer le repertoire parent si l'URL est un fichier SQLite
    db_path = Path(database_url.replace("sqlite:///", "", 1))
    db_path.parent.mkdir(exist_ok=True, parents=True)

    return create_engine(
        database_url,
        echo=echo,
        connect_args={"check_same_thread": False},
    )


def init_db(engine: Engine) -> None:
    """
    Cree la table parcel si elle n'existe pas deja.

    Le schema est normalement provisionne a l'exterieur ; create_all
    n'emet CREATE TABLE que pour les tables manquantes et ne modifie
    jamais une table existante. C'est aussi la premiere connexion du
    processus : une base inaccessible echoue ici.

    Raises :
        StorageError : connexion ou creation de table impossible
    """
    # Import des modeles pour enregistrer leurs metadonnees
    # L'import est fait ici pour eviter les imports circulaires
    from src.infrastructure.persistence import models  # noqa: F401

    try:
        SQLModel.metadata.create_all(engine)
    except SQLAlchemyError as exc:
        logger.error("Schema inaccessible", url=str(engine.url), error=str(exc))
        raise StorageError(f"base de donnees {engine.url} inaccessible : {exc}") from exc
    logger.debug("Schema verifie", url=str(engine.url))
