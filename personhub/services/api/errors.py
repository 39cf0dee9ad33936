# personhub/services/api/errors.py
from __future__ import annotations

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from personhub.common.logging import get_logger
from personhub.domain.errors import NotFoundError, StorageError, ValidationError

logger = get_logger()

# Not-found is reported as a server error on this API, like any failed lookup
# during a mutation.
STATUS_BY_ERROR = {
    ValidationError: HTTPStatus.BAD_REQUEST,
    NotFoundError: HTTPStatus.INTERNAL_SERVER_ERROR,
    StorageError: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def _error(status: HTTPStatus, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": message})


def _format_validation(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(x) for x in err.get("loc", ()) if x != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "malformed request body"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def _on_request_validation(_: Request, exc: RequestValidationError) -> JSONResponse:
        return _error(HTTPStatus.BAD_REQUEST, _format_validation(exc))

    @app.exception_handler(StarletteHTTPException)
    async def _on_http_error(_: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)

    for err_cls, status in STATUS_BY_ERROR.items():
        def _handler(_: Request, exc: Exception, status: HTTPStatus = status) -> JSONResponse:
            if status >= HTTPStatus.INTERNAL_SERVER_ERROR:
                logger.error("%s: %s", type(exc).__name__, exc)
            return _error(status, str(exc))
        app.add_exception_handler(err_cls, _handler)
