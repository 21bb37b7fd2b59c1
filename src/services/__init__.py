"""
Couche application (services).

- ParcelService : regles metier et confirmations utilisateur au-dessus du store
"""

from src.services.parcel_service import ParcelService

__all__ = [
    "ParcelService",
]
