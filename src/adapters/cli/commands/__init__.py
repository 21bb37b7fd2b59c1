"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.parcel_commands import (
    change_address,
    delete,
    demo,
    list_parcels,
    next_status,
    register,
    show,
)

__all__ = [
    "register",
    "show",
    "list_parcels",
    "next_status",
    "change_address",
    "delete",
    "demo",
]
