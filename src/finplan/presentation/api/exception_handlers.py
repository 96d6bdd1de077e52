"""Centralized exception handlers for the FastAPI application.

Domain exceptions become JSON errors whose status follows the error code;
codes without an explicit entry fall back to the exception's category.
Constraint violations raised by the database surface as 409 conflicts,
anything else as an opaque 500.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from finplan.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)

logger = logging.getLogger(__name__)

_BAD_REQUEST = status.HTTP_400_BAD_REQUEST
_NOT_FOUND = status.HTTP_404_NOT_FOUND
_CONFLICT = status.HTTP_409_CONFLICT
_UNPROCESSABLE = status.HTTP_422_UNPROCESSABLE_ENTITY

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # money and field validation
    ErrorCode.VALIDATION_ERROR: _BAD_REQUEST,
    ErrorCode.REQUIRED_FIELD: _BAD_REQUEST,
    ErrorCode.INVALID_AMOUNT: _BAD_REQUEST,
    ErrorCode.INVALID_CURRENCY: _BAD_REQUEST,
    ErrorCode.INVALID_DATE: _BAD_REQUEST,
    # budgets
    ErrorCode.INVALID_BUDGET_AMOUNT: _BAD_REQUEST,
    ErrorCode.INVALID_BUDGET_PERIOD: _BAD_REQUEST,
    ErrorCode.BUDGET_NOT_FOUND: _NOT_FOUND,
    ErrorCode.SPENDING_NOT_FOUND: _NOT_FOUND,
    ErrorCode.BUDGET_ALREADY_EXISTS: _CONFLICT,
    # debts
    ErrorCode.DEBT_NOT_FOUND: _NOT_FOUND,
    ErrorCode.DEBT_PAYMENT_NOT_FOUND: _NOT_FOUND,
    # goals
    ErrorCode.GOAL_INVALID_TARGET_AMOUNT: _BAD_REQUEST,
    ErrorCode.GOAL_INVALID_DUE_DATE: _BAD_REQUEST,
    ErrorCode.GOAL_NOT_FOUND: _NOT_FOUND,
    ErrorCode.GOAL_TRANSACTION_NOT_FOUND: _NOT_FOUND,
    ErrorCode.GOAL_TITLE_ALREADY_EXISTS: _CONFLICT,
    # income
    ErrorCode.INVALID_INCOME_PERIOD: _BAD_REQUEST,
    ErrorCode.INCOME_NOT_FOUND: _NOT_FOUND,
    ErrorCode.INCOME_TRANSACTION_NOT_FOUND: _NOT_FOUND,
    # cross-cutting rules
    ErrorCode.CURRENCY_MISMATCH: _UNPROCESSABLE,
    ErrorCode.INSUFFICIENT_BALANCE: _UNPROCESSABLE,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Checked in order; the first matching category wins.
CATEGORY_TO_STATUS: tuple[tuple[type[DomainException], int], ...] = (
    (EntityNotFoundError, _NOT_FOUND),
    (ConflictError, _CONFLICT),
    (ValidationError, _BAD_REQUEST),
    (BusinessRuleViolation, _UNPROCESSABLE),
)


def status_for(exc: DomainException) -> int:
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]
    for category, status_code in CATEGORY_TO_STATUS:
        if isinstance(exc, category):
            return status_code
    return _BAD_REQUEST


def _error_response(
    status_code: int,
    message: str,
    code: ErrorCode | str,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code.value if isinstance(code, ErrorCode) else code,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the domain, storage and catch-all handlers on ``app``.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        logger.warning(
            "%s %s rejected: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )
        return _error_response(status_for(exc), exc.message, exc.code)

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(
        request: Request,
        exc: IntegrityError,
    ) -> JSONResponse:
        """A write broke a database constraint; nothing of it was stored."""
        logger.warning(
            "Constraint violation on %s %s: %s",
            request.method,
            request.url.path,
            exc.orig,
        )
        return _error_response(
            _CONFLICT,
            "The change conflicts with stored data and was not saved",
            ErrorCode.CONFLICT,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An internal error occurred",
            ErrorCode.INTERNAL_ERROR,
        )
