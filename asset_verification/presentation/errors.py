"""
HTTP error mapping for verification domain errors.

Every domain error becomes a JSON body ``{"error", "message", "details"}``
with the status code for its type. Werkzeug HTTP errors (unknown route,
wrong method, rate limit) use the same body shape.
"""

from flask import jsonify
from werkzeug.exceptions import HTTPException

from asset_verification.buisness.verification.errors import (
    CycleClosedError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
    VerificationDomainError,
)
from asset_verification.logger import get_logger

logger = get_logger("asset_verification.presentation.errors")

STATUS_CODES = {
    ValidationError: 400,
    NotFoundError: 404,
    InvalidStateError: 409,
    CycleClosedError: 409,
}


def status_for(error: VerificationDomainError) -> int:
    for error_type in type(error).__mro__:
        if error_type in STATUS_CODES:
            return STATUS_CODES[error_type]
    return 400


def error_response(error: VerificationDomainError):
    status = status_for(error)
    logger.info(f"{type(error).__name__} -> {status}: {error.message}")
    return jsonify({
        'error': type(error).__name__,
        'message': error.message,
        'details': error.details or {},
    }), status


def http_error_response(error: HTTPException):
    return jsonify({
        'error': error.name.replace(' ', ''),
        'message': error.description,
        'details': {},
    }), error.code


def init_error_handlers(app):
    app.register_error_handler(VerificationDomainError, error_response)
    app.register_error_handler(HTTPException, http_error_response)
