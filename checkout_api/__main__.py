"""
Lancement local du service de checkout: `python -m checkout_api`.
Hôte, port, reload et niveau de logs viennent de checkout_api.config (.env compris).
"""
import uvicorn

from checkout_api import config


def run() -> None:
    uvicorn.run(
        "checkout_api.asgi:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.UVICORN_RELOAD,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
