"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI.
L'engine est cree une seule fois puis transmis explicitement aux sessions,
au store et au service : aucune poignee de base de donnees globale.
"""

from dependency_injector import containers, providers
from rich.console import Console
from sqlmodel import Session

from .config import Settings
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.repositories import SQLModelParcelStore
from .services.parcel_service import ParcelService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree la table parcel si absente
        service = container.parcel_service()
        service.register(1, "Lyon, 12 rue de la Republique")
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Engine - unique pour tout le processus
    engine = providers.Singleton(
        create_db_engine,
        database_url=config.provided.database_url,
        echo=config.provided.echo_sql,
    )

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db, engine=engine)

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(Session, engine)

    # Sortie des confirmations utilisateur (stdout)
    console = providers.Singleton(Console)

    # Store - Factory pour nouvelle instance avec session fraiche
    parcel_store = providers.Factory(
        SQLModelParcelStore,
        session=session,
    )

    # Service - Factory car depend du store (session fraiche)
    parcel_service = providers.Factory(
        ParcelService,
        store=parcel_store,
        console=console,
    )
