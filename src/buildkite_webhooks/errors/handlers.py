"""FastAPI exception handlers producing JSON error responses for webhook failures."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from buildkite_webhooks.errors.exceptions import WebhookError
from buildkite_webhooks.webhooks.parser import EVENT_TYPES

logger = logging.getLogger(__name__)

_EVENT_MODEL_NAMES = frozenset(model.__name__ for model in EVENT_TYPES.values())


class ErrorDetail(BaseModel):
    """Error detail in webhook responses."""

    model_config = ConfigDict(extra="forbid")

    code: str
    message: str
    details: dict | list | str | None = None


class ErrorResponse(BaseModel):
    """Envelope returned for every rejected webhook."""

    model_config = ConfigDict(extra="forbid")

    error: ErrorDetail


def _error_response(status_code: int, detail: ErrorDetail) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=detail).model_dump(mode="json", exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register webhook exception handlers on a caller-owned FastAPI app.

    ``pydantic.ValidationError`` is a 400 only when it comes from decoding a
    webhook event model; any other validation failure is a server error.
    """

    @app.exception_handler(WebhookError)
    async def webhook_error_handler(request: Request, exc: WebhookError):
        logger.warning(
            "buildkite_webhook_rejected",
            extra={"path": request.url.path, "code": exc.code, "reason": exc.message},
        )
        return _error_response(
            exc.status_code,
            ErrorDetail(code=exc.code, message=exc.message, details=exc.details),
        )

    @app.exception_handler(PydanticValidationError)
    async def decode_error_handler(request: Request, exc: PydanticValidationError):
        if exc.title not in _EVENT_MODEL_NAMES:
            logger.error(
                "validation_error_outside_webhook_decode",
                extra={"path": request.url.path, "model": exc.title},
            )
            return _error_response(
                500, ErrorDetail(code="INTERNAL_ERROR", message="internal server error")
            )
        logger.warning(
            "buildkite_webhook_undecodable",
            extra={"path": request.url.path, "error_count": exc.error_count()},
        )
        return _error_response(
            400,
            ErrorDetail(
                code="PAYLOAD_DECODE_ERROR",
                message=f"payload does not match {exc.title} schema",
                details=exc.errors(include_url=False, include_context=False, include_input=False),
            ),
        )
