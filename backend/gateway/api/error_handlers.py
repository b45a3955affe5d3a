"""Error Handlers — global exception handlers for the gateway.

Invariants:
    - GatewayError → its own to_response() body and http_status
    - RequestValidationError → 400 with the same field-level "errs" shape; an
      undecodable body on a proxy route is reported through that route's rules
    - Exception (catch-all) → 500 generic message, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (GatewayError), framework validation, catch-all
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from gateway.core.errors import (
    GENERIC_ERROR_MESSAGE, ErrorSeverity, GatewayError, RequestFieldsError,
)
from gateway.core.proxy_routes import inbound_values, route_for_path
from gateway.core.validation import find_violations

logger = logging.getLogger(__name__)

_SEVERITY_TO_LEVEL = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_gateway_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_gateway_error_handler(app: FastAPI) -> None:

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError):
        """Handle validation, upstream and transport errors."""
        logger.log(
            _SEVERITY_TO_LEVEL[exc.severity],
            f"GatewayError: {exc.message}",
            extra={**exc.log_extra(), "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed input rejected by FastAPI before the route runs."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=jsonable_encoder(_build_validation_error_response(request, exc)),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": GENERIC_ERROR_MESSAGE},
        )


def _build_validation_error_response(
    request: Request, exc: RequestValidationError,
) -> dict:
    """Build the field-level "errs" body from FastAPI validation errors.

    An undecodable body on a proxy route is reported through the route's own
    rules, with text treated as missing, so query violations are listed too.
    """
    route = route_for_path(request.url.path)
    if route is not None and any(_is_body_error(e) for e in exc.errors()):
        values = inbound_values(dict(request.query_params), None)
        violations = find_violations(route.rules, values)
        if violations:
            return RequestFieldsError(violations).to_response()

    errs = []
    for e in exc.errors():
        loc = [str(part) for part in e["loc"]]
        errs.append({
            "type": "field",
            "location": loc[0] if loc else "body",
            "path": "text" if _is_body_error(e) else ".".join(loc[1:]),
            "value": e.get("input"),
            "msg": e["msg"],
        })
    return {"errs": errs}


def _is_body_error(error: dict) -> bool:
    """True for a JSON decode failure or an error on the body as a whole."""
    loc = error["loc"]
    if not loc or loc[0] != "body":
        return False
    return error["type"] == "json_invalid" or len(loc) == 1
