"""
Gestionnaires d'exceptions.
- HTTPException (FastAPI ou Starlette: 404, 405...): corps JSON standard {"detail": ...}.
Le pipeline de paiement, lui, ne lève jamais jusqu'ici: il répond avec {error, requestId}.
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

def register_exception_handlers(app: FastAPI) -> None:
    """
    Enregistre le handler HTTPException pour les clients programmatiques.
    """
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_as_json(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )
