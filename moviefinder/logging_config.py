"""
Configuration du logging de l'application via loguru.

Deux sorties :
- console : colorée, au niveau configuré
- fichier : JSON avec rotation, toujours en DEBUG (appels OMDb compris)

La clé OMDb voyage en paramètre d'URL : toute valeur "apikey=..." est masquée
avant d'atteindre un handler, et les tracebacks n'affichent pas les variables.
"""

import re
import sys
from pathlib import Path

from loguru import logger

_API_KEY_PATTERN = re.compile(r"(apikey=)[^&\s\"']+", re.IGNORECASE)
REDACTED = "***"


def redact_secrets(record: dict) -> None:
    """Masque la clé API dans le message et les champs extra d'un enregistrement."""
    record["message"] = _API_KEY_PATTERN.sub(rf"\g<1>{REDACTED}", record["message"])
    for key, value in record["extra"].items():
        if isinstance(value, str):
            record["extra"][key] = _API_KEY_PATTERN.sub(rf"\g<1>{REDACTED}", value)


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/moviefinder.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau minimum pour la console (DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier JSON de log
        rotation_size : Taille maximale avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conservés
    """
    logger.remove()
    logger.configure(patcher=redact_secrets)

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
        diagnose=False,
    )

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
        diagnose=False,
    )

    logger.debug("Logging configuré", log_file=str(log_file), rotation=rotation_size)
