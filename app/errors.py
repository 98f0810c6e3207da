import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

UNAUTHENTICATED = "Unauthenticated."
FORBIDDEN = "Forbidden"


class FieldValidationError(Exception):
    """422 raised after schema validation (uniqueness, foreign keys, cross-field rules)."""

    def __init__(self, errors: dict[str, list[str]]):
        super().__init__(errors)
        self.errors = errors


def _field_name(loc) -> str:
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return parts[-1] if parts else "body"


def field_errors(raw_errors) -> dict[str, list[str]]:
    """Group pydantic error dicts by field name."""
    errors: dict[str, list[str]] = {}
    for err in raw_errors:
        errors.setdefault(_field_name(err.get("loc", ())), []).append(err.get("msg", "Invalid value."))
    return errors


def _validation_response(errors: dict[str, list[str]]) -> JSONResponse:
    first = next(iter(errors.values()), ["The given data was invalid."])[0]
    return JSONResponse(
        status_code=422,
        content={"message": first, "errors": errors},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return _validation_response(field_errors(exc.errors()))


async def field_validation_handler(request: Request, exc: FieldValidationError):
    return _validation_response(exc.errors)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Server Error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(FieldValidationError, field_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
