"""
Mapping from application exceptions to HTTP responses.

Every error response carries a JSON body of the form
``{"detail": "<message>"}``, the same shape FastAPI uses for
``HTTPException``:

* ``ValidationError`` -> 400 with the validation message
* ``NotFoundError`` -> 404 with the not-found message
* ``PersistenceFault`` and any unhandled exception -> 500 with a
  generic message; the traceback is logged, not returned.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from social_media_api.app.core.exceptions import NotFoundError, PersistenceFault, ValidationError


logger = logging.getLogger(__name__)

INTERNAL_ERROR_DETAIL = "Internal server error"


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.message},
    )


async def not_found_error_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": INTERNAL_ERROR_DETAIL},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers above to ``app``."""
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(PersistenceFault, internal_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)
