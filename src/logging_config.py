"""
Configuration du logging de l'application via loguru.

Deux sorties :
- stderr : ligne courte et colorée, niveau piloté par la config ou par -v/-q
- fichier : enregistrements JSON (contexte number/client/status inclus), rotatifs

Les confirmations destinées à l'utilisateur (colis enregistré, nouveau statut...)
ne passent pas par ici : elles sont affichées sur la sortie standard par le service.
"""

import sys
from typing import Optional

from loguru import logger

from src.config import Settings

# Le contexte structuré (number=, client=...) est ajouté en fin de ligne
_STDERR_FORMAT = (
    "<green>{time:HH:mm:ss}</green> "
    "<level>{level: <7}</level> "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level> <dim>{extra}</dim>"
)


def configure_logging(settings: Settings, level: Optional[str] = None) -> None:
    """Remplace les handlers loguru selon la configuration.

    Args :
        settings : Paramètres de l'application (fichier, rotation, rétention)
        level : Niveau stderr imposé par la CLI ; défaut settings.log_level
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=level or settings.log_level,
        format=_STDERR_FORMAT,
        colorize=True,
    )

    # Le fichier garde tout ce qu'émet le package, y compris le DEBUG du store
    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        filter="src",
        format="{message}",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(
        "Logging configuré",
        log_file=str(settings.log_file),
        stderr_level=level or settings.log_level,
    )


def level_from_verbosity(verbose: int, quiet: bool, default: str = "INFO") -> str:
    """Traduit les options CLI --verbose/--quiet en niveau loguru.

    -q force ERROR ; -v passe en DEBUG ; -vv et au-dela en TRACE.
    Sans option, le niveau configuré (default) est conservé.
    """
    if quiet:
        return "ERROR"
    if verbose >= 2:
        return "TRACE"
    if verbose == 1:
        return "DEBUG"
    return default
