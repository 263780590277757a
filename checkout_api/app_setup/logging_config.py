"""
Configuration centralisée des logs.
- Une seule sortie console (stdout), compatible Docker/Render.
- Format commun: horodatage, niveau, logger, message.
"""
import logging
import sys

from checkout_api.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

def setup_logging(level: str = LOG_LEVEL) -> None:
    """
    Configure le logger racine (idempotent: n'ajoute pas de second handler).
    - Niveau: LOG_LEVEL (INFO par défaut), retombe sur INFO si inconnu.
    - Réduit la verbosité du SDK stripe (WARNING).
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))
    if not any(getattr(h, "_checkout_api", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._checkout_api = True
        root.addHandler(handler)

    logging.getLogger("stripe").setLevel(logging.WARNING)
