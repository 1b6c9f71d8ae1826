from __future__ import annotations

import logging
import traceback
from datetime import datetime
from typing import Any, Dict, Optional

from flask import jsonify
from requests.exceptions import ConnectionError, HTTPError, Timeout
from werkzeug.exceptions import HTTPException

# Upstream diagnostics are cut to this many characters before reaching a caller
MAX_ERROR_CHARS = 300


def truncate(text: Optional[str], limit: int = MAX_ERROR_CHARS) -> str:
    text = text or ""
    if len(text) <= limit:
        return text
    return text[:limit].rstrip() + "..."


class AssignmentModifierError(Exception):
    """Base exception for failures surfaced to API callers.

    Attributes:
        message: Description of the error
        status_code: HTTP status code associated with the failure
    """

    status_code = 500
    error_type = "internal_error"

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class RequestValidationError(AssignmentModifierError):
    """Malformed or incomplete request body."""

    status_code = 400
    error_type = "validation_error"


class InvalidUrlError(AssignmentModifierError):
    """No Google Doc ID could be extracted from the URL."""

    error_type = "invalid_url"


class DocumentFetchError(AssignmentModifierError):
    """Custom exception for document fetching issues.

    Attributes:
        upstream_status: HTTP status returned by the export endpoint, if any
        excerpt: Beginning of the upstream response body
    """

    error_type = "document_fetch_error"

    def __init__(self, message: str, upstream_status: Optional[int] = None, excerpt: str = "") -> None:
        super().__init__(message)
        self.upstream_status = upstream_status
        self.excerpt = excerpt


class EmptyDocumentError(AssignmentModifierError):
    error_type = "empty_document"


class EmptyModelResponseError(AssignmentModifierError):
    error_type = "empty_model_response"


class InvalidModelOutputError(AssignmentModifierError):
    """The model answered with text that is not valid JSON.

    Attributes:
        raw_excerpt: Beginning of the raw model output, for logs only
    """

    error_type = "invalid_model_output"

    def __init__(self, message: str, raw_excerpt: str = "") -> None:
        super().__init__(message)
        self.raw_excerpt = raw_excerpt


class ModelRequestError(AssignmentModifierError):
    """The chat completion call itself failed."""

    error_type = "model_request_error"


class PublishError(AssignmentModifierError):
    """Creating or sharing the Google Doc failed."""

    error_type = "publish_error"


def handle_api_error(error: Exception) -> Dict[str, Any]:
    """Return the standardized error envelope: {"ok": False, "error": str, "type": str}.

    Known exceptions keep their own message; requests, OpenAI and Google API
    errors are classified by type and their text is truncated.
    """
    type_str = "unknown_error"
    msg = str(error) if str(error) else error.__class__.__name__

    if isinstance(error, AssignmentModifierError):
        return {"ok": False, "error": truncate(error.message), "type": error.error_type}

    # Try to detect requests-related errors
    if isinstance(error, Timeout):
        type_str = "network_timeout"
    elif isinstance(error, ConnectionError):
        type_str = "network_connection_error"
    elif isinstance(error, HTTPError):
        status = getattr(error.response, "status_code", None)
        type_str = "http_error"
        if status:
            msg = f"HTTP {status}: " + (getattr(error.response, "text", msg) or msg)

    # Detect OpenAI and Google client errors without importing the libraries
    cls_name = error.__class__.__name__.lower()
    mod_name = getattr(error.__class__, "__module__", "")
    if "openai" in mod_name or "openai" in cls_name:
        type_str = "openai_error"
    elif mod_name.startswith("googleapiclient") or mod_name.startswith("google.auth"):
        type_str = "google_api_error"

    return {"ok": False, "error": truncate(msg), "type": type_str}


def error_status(error: Exception) -> int:
    if isinstance(error, AssignmentModifierError):
        return error.status_code
    if isinstance(error, HTTPException) and error.code:
        return error.code
    return 500


def configure_logging(level: str = "INFO") -> None:
    # Basic logging configuration if not already configured
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=getattr(logging, str(level).upper(), logging.INFO),
            format="%(asctime)s | %(levelname)s | %(message)s",
        )


def log_error(error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
    """Log a formatted error with context information.

    Uses logging with levels: WARNING for client (4xx) errors, ERROR otherwise,
    INFO for context and DEBUG for the traceback.
    """
    context = context or {}
    info = handle_api_error(error)

    configure_logging()

    level = logging.WARNING if error_status(error) < 500 else logging.ERROR

    # Log the main error
    logging.log(level, f"{info['type']}: {info['error']}")

    # Log context information
    if context:
        logging.info(f"Context: {context}")

    # Log traceback for debugging
    tb = traceback.format_exc()
    if tb and "NoneType: None" not in tb:
        logging.debug(tb)


def error_response(error: Exception, context: Optional[Dict[str, Any]] = None):
    """Log the error and build the (json, status) pair returned by a route."""
    log_error(error, context)
    info = handle_api_error(error)
    return jsonify({"ok": False, "error": info["error"]}), error_status(error)


def register_error_handlers(app):
    """Register Flask error handlers that use our standardized error payloads."""

    @app.errorhandler(404)
    def handle_404(error):
        return jsonify({"ok": False, "error": "Not Found"}), 404

    @app.errorhandler(405)
    def handle_405(error):
        return jsonify({"ok": False, "error": "Method Not Allowed"}), 405

    @app.errorhandler(400)
    def handle_400(error):
        return jsonify({"ok": False, "error": getattr(error, "description", None) or "Bad Request"}), 400

    @app.errorhandler(AssignmentModifierError)
    def handle_known_error(error):
        return error_response(error)

    @app.errorhandler(Exception)
    def handle_generic_exception(error):
        # Catch-all handler to standardize unexpected exceptions
        return error_response(error, context={"timestamp": datetime.utcnow().isoformat()})
