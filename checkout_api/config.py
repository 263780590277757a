# checkout_api.config
from pathlib import Path
import os
from dotenv import load_dotenv

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH, override=False)

"""
Configuration centrale du service de checkout.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Normalise et expose le secret Stripe et la version d'API épinglée
- Expose les paramètres du pipeline (devise, montant minimum, tentatives, délai)
- Expose CORS/hosts et le niveau de logs
"""

def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

def _int_env(name: str, default: int) -> int:
    """Lit un entier depuis l'environnement; retombe sur `default` si absent ou illisible."""
    raw = _clean_env(os.getenv(name) or "")
    try:
        return int(raw) if raw else default
    except ValueError:
        return default

# Stripe: clé secrète (obligatoire pour servir des paiements) et version d'API
STRIPE_SECRET_KEY = _clean_env(os.getenv("STRIPE_SECRET_KEY") or "")
STRIPE_API_VERSION = _clean_env(os.getenv("STRIPE_API_VERSION") or "2023-10-16")

# Pipeline de paiement
PAYMENT_CURRENCY = _clean_env(os.getenv("PAYMENT_CURRENCY") or "usd").lower()
MIN_AMOUNT_CENTS = _int_env("MIN_AMOUNT_CENTS", 50)  # $0.50
MAX_AMOUNT_CENTS = _int_env("MAX_AMOUNT_CENTS", 99999999)  # $999,999.99, plafond Stripe
MAX_PAYMENT_ATTEMPTS = _int_env("MAX_PAYMENT_ATTEMPTS", 3)
PAYMENT_RETRY_DELAY_MS = _int_env("PAYMENT_RETRY_DELAY_MS", 1000)
AMOUNT_TOLERANCE = "0.01"  # écart toléré entre total recalculé et total annoncé

# CORS (dev)
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
DEFAULT_ALLOWED_HOSTS = "localhost,127.0.0.1"
ALLOWED_HOSTS = [h.strip() for h in os.getenv("ALLOWED_HOSTS", DEFAULT_ALLOWED_HOSTS).split(",") if h.strip()]

# Serveur (python -m checkout_api)
HOST = _clean_env(os.getenv("HOST") or "0.0.0.0")
PORT = _int_env("PORT", 8000)
UVICORN_RELOAD = _clean_env(os.getenv("UVICORN_RELOAD") or "").lower() in ("1", "true", "yes")

LOG_LEVEL = _clean_env(os.getenv("LOG_LEVEL") or "info").upper()
