"""
Fixtures pytest partagees pour les tests ParcelTrack.

Ce module contient les fixtures communes utilisees dans les tests:
- Engine SQLite en memoire avec la table parcel
- Store SQLModel et service branches sur cet engine
- Console Rich capturant les confirmations
- Mock de IParcelStore
- Settings de test avec chemins temporaires
"""

import io
from pathlib import Path
from typing import Iterator
from unittest.mock import MagicMock

import pytest
from rich.console import Console
from sqlalchemy import Engine
from sqlmodel import Session

from src.config import Settings
from src.core.ports.repositories import IParcelStore
from src.infrastructure.persistence.database import create_db_engine, init_db
from src.infrastructure.persistence.repositories import SQLModelParcelStore
from src.services.parcel_service import ParcelService


@pytest.fixture
def engine() -> Iterator[Engine]:
    """Engine SQLite en memoire, table parcel creee."""
    db_engine = create_db_engine("sqlite://")
    init_db(db_engine)
    yield db_engine
    db_engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    """Session SQLModel ouverte sur l'engine en memoire."""
    with Session(engine) as db_session:
        yield db_session


@pytest.fixture
def store(session: Session) -> SQLModelParcelStore:
    """Store reel sur la base en memoire."""
    return SQLModelParcelStore(session)


@pytest.fixture
def console() -> Console:
    """
    Console Rich ecrivant dans un buffer.

    Lire la sortie avec console.file.getvalue().
    """
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def service(store: SQLModelParcelStore, console: Console) -> ParcelService:
    """Service branche sur le store reel et la console capturee."""
    return ParcelService(store=store, console=console)


@pytest.fixture
def mock_store() -> MagicMock:
    """
    Mock de IParcelStore pour les tests.

    Les mutations conditionnelles reussissent par defaut.
    Configurer le mock dans chaque test pour des comportements specifiques.
    """
    mock = MagicMock(spec=IParcelStore)
    mock.add.return_value = 1
    mock.get_by_client.return_value = []
    mock.set_address.return_value = True
    mock.delete.return_value = True
    return mock


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler base et fichier de log.
    """
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        log_file=tmp_path / "test.log",
    )
