"""
Gestion centralisee des erreurs de l'API.

Toutes les erreurs sont renvoyees dans l'enveloppe
{data: null, error: {message, code}} :
- MediaNotFoundError -> 404 NOT_FOUND
- ProviderError -> 502 AGGREGATION_ERROR
- Parametres invalides -> 400 VALIDATION_ERROR
- Erreur inattendue -> 500 INTERNAL_ERROR
"""

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from ..core.exceptions import AggregationError, MediaNotFoundError
from .schemas import ErrorDetail, ErrorResponse


def error_response(status_code: int, message: str, code: Optional[str] = None) -> JSONResponse:
    """Construit une reponse d'erreur dans l'enveloppe standard."""
    body = ErrorResponse(error=ErrorDetail(message=message, code=code))
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


async def aggregation_error_handler(request: Request, exc: AggregationError) -> JSONResponse:
    if isinstance(exc, MediaNotFoundError):
        logger.info(f"{request.url.path}: {exc.message}")
        return error_response(status.HTTP_404_NOT_FOUND, exc.message, exc.code)
    logger.error(f"{request.url.path}: {exc.message} ({exc.__cause__})")
    return error_response(status.HTTP_502_BAD_GATEWAY, exc.message, exc.code)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'][1:])}: {error['msg']}"
        for error in exc.errors()
    )
    logger.debug(f"{request.url.path}: parametres invalides: {details}")
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        f"Invalid request parameters: {details}",
        "VALIDATION_ERROR",
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"{request.url.path}: erreur inattendue")
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error", "INTERNAL_ERROR"
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Branche les gestionnaires d'erreurs sur l'application."""
    app.add_exception_handler(AggregationError, aggregation_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
