"""
ParcelTrack - Suivi de colis a travers leur cycle de vie.

Ce package enregistre des colis, fait avancer leur statut
(registered -> sent -> delivered) et protege les modifications
d'adresse et les suppressions selon le statut courant.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, erreurs)
- services/ : Couche application (regles metier, affichage des confirmations)
- infrastructure/ : Persistance SQLite via SQLModel
- adapters/ : Interface CLI (Typer + Rich)
"""
