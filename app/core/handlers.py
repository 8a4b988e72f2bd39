# app/core/handlers.py
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.core.config import settings
from app.core.exceptions import BaseAPIException, NotFoundException
from app.core.logging import logger


def _error_body(code: str, message: str, details=None) -> dict:
    return {
        "success": False,
        "error": {
            "code": code,
            "message": message,
            "details": details
        }
    }

# 1. Custom logic errors raised by the service
async def custom_api_exception_handler(request: Request, exc: BaseAPIException):
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.code, exc.message, exc.details),
    )

# 2. Missing documents: bare 404, no body
async def not_found_exception_handler(request: Request, exc: NotFoundException):
    return Response(status_code=status.HTTP_404_NOT_FOUND)

# 3. Validation errors (pydantic rejects the request body or params)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = {}
    for error in exc.errors():
        # Get field name (e.g., "body.age" becomes "age")
        field = ".".join(str(x) for x in error["loc"] if x != "body")
        details[field] = error["msg"]

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=_error_body("VALIDATION_ERROR", "Input validation failed", details),
    )

# 4. Standard HTTP errors (unknown URL, wrong method, ...)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body("HTTP_ERROR", str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )

# 5. Anything else: log it, answer 500, keep serving
async def general_exception_handler(request: Request, exc: Exception):
    logger.critical(f"Unhandled Exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(
            "INTERNAL_SERVER_ERROR",
            "An unexpected error occurred. Please contact support.",
            str(exc) if settings.DEBUG else None,
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    # Starlette picks the most specific class in the MRO, so NotFoundException
    # wins over BaseAPIException.
    app.add_exception_handler(NotFoundException, not_found_exception_handler)
    app.add_exception_handler(BaseAPIException, custom_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
