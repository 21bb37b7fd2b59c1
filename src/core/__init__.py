"""
Couche domaine (core).

Contient l'entite Parcel, ses statuts, les erreurs metier et les ports.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entités métier (Parcel, ParcelStatus)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- errors : Taxonomie des erreurs (NotFoundError, PreconditionError, StorageError)
"""
