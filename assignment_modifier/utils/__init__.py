from __future__ import annotations

# Re-export validators and error handlers for convenience
from .error_handlers import (
    AssignmentModifierError,
    RequestValidationError,
    InvalidUrlError,
    DocumentFetchError,
    EmptyDocumentError,
    EmptyModelResponseError,
    InvalidModelOutputError,
    ModelRequestError,
    PublishError,
    configure_logging,
    error_response,
    handle_api_error,
    log_error,
    register_error_handlers,
    truncate,
)

from .validators import (
    extract_doc_id,
    validate_modify_request,
    validate_create_doc_request,
    assignment_shape_problems,
)

__all__ = [
    # error handlers
    "AssignmentModifierError",
    "RequestValidationError",
    "InvalidUrlError",
    "DocumentFetchError",
    "EmptyDocumentError",
    "EmptyModelResponseError",
    "InvalidModelOutputError",
    "ModelRequestError",
    "PublishError",
    "configure_logging",
    "error_response",
    "handle_api_error",
    "log_error",
    "register_error_handlers",
    "truncate",
    # validators
    "extract_doc_id",
    "validate_modify_request",
    "validate_create_doc_request",
    "assignment_shape_problems",
]
