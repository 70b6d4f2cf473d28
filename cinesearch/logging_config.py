"""
Configuration du logging de CineSearch via loguru.

Chaque requete HTTP est journalisee dans le contexte de sa session navigateur :
le middleware de session ouvre un logger.contextualize(session=...) et les
taches de chargement lancees pendant la requete heritent de ce contexte.

- Console : lisible, coloree, avec les 8 premiers caracteres de la session
- Fichier : une ligne JSON par message (cle de session complete dans record.extra)
"""

import sys
from pathlib import Path

from loguru import logger

# Valeur de extra["session"] hors requete HTTP (CLI, demarrage, arret)
NO_SESSION = "-"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[session]:.8}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/cinesearch.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Installe les sorties console et fichier.

    Args :
        log_level : Niveau minimum en console ; le fichier recoit tout des DEBUG
        log_file : Fichier JSON (son repertoire est cree si besoin)
        rotation_size : Taille declenchant la rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conserves

    Les appels TMDB et les chargements remplaces sont traces en DEBUG : ils
    n'apparaissent en console que si log_level vaut DEBUG.
    """
    logger.remove()
    logger.configure(extra={"session": NO_SESSION})

    logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True)

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
    )

    logger.debug("Logging configure", log_file=str(log_file), level=log_level)
