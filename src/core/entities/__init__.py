"""
Business entities representing core domain concepts.

Exports:
- Parcel: A tracked shipping record
- ParcelStatus: Lifecycle stage of a parcel
"""

from src.core.entities.parcel import CREATED_AT_FORMAT, Parcel, ParcelStatus

__all__ = [
    "CREATED_AT_FORMAT",
    "Parcel",
    "ParcelStatus",
]
