"""
Couche adaptateurs.

Les adaptateurs pilotent ou exposent le domaine vers l'exterieur.

Sous-packages :
- cli/ : Interface ligne de commande (Typer + Rich)

La persistance (SQLModel + SQLite) vit dans infrastructure/persistence/.
Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""
