from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Tuple

from assignment_modifier.config import Config
from assignment_modifier.utils.error_handlers import RequestValidationError

DOC_ID_PATTERN = re.compile(r"/document/d/([a-zA-Z0-9_-]+)")


def extract_doc_id(url: Optional[str]) -> Optional[str]:
    """Return the Google Doc ID captured from a /document/d/<id> path, or None."""
    if not url or not isinstance(url, str):
        return None
    m = DOC_ID_PATTERN.search(url)
    return m.group(1) if m else None


def _string_list(data: Dict[str, Any], field: str) -> List[str]:
    value = data.get(field)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise RequestValidationError(f"{field} must be a list of strings.")
    return value


def validate_modify_request(data: Any) -> Tuple[str, List[str], List[str]]:
    """Check a /modify body and return (doc_url, profiles, supports).

    Only the Docs domain is checked here; ID extraction happens in the fetcher.
    """
    if not isinstance(data, dict):
        raise RequestValidationError("Request body must be a JSON object.")
    doc_url = data.get("docUrl")
    if not doc_url or not isinstance(doc_url, str):
        raise RequestValidationError("docUrl is required and must be a string.")
    if Config.DOCS_DOMAIN not in doc_url:
        raise RequestValidationError("docUrl must be a Google Docs link.")
    return doc_url, _string_list(data, "profiles"), _string_list(data, "supports")


def validate_create_doc_request(data: Any) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise RequestValidationError("Request body must be a JSON object.")
    assignment = data.get("assignment")
    if not isinstance(assignment, dict):
        raise RequestValidationError("assignment object is required.")
    return assignment


def assignment_shape_problems(value: Any) -> List[str]:
    """List the ways a parsed model answer deviates from the Assignment shape.

    An empty list means the value looks like
    {"title": str, "notesForTeacher": [str], "sections": [{"title": str, "body": [str]}]}.
    """
    if not isinstance(value, dict):
        return [f"expected an object, got {type(value).__name__}"]
    problems: List[str] = []
    if not isinstance(value.get("title"), str):
        problems.append("title is not a string")
    notes = value.get("notesForTeacher")
    if not isinstance(notes, list) or not all(isinstance(n, str) for n in notes):
        problems.append("notesForTeacher is not a list of strings")
    sections = value.get("sections")
    if not isinstance(sections, list):
        problems.append("sections is not a list")
        return problems
    for i, section in enumerate(sections):
        if not isinstance(section, dict):
            problems.append(f"sections[{i}] is not an object")
            continue
        if not isinstance(section.get("title"), str):
            problems.append(f"sections[{i}].title is not a string")
        if not isinstance(section.get("body"), list):
            problems.append(f"sections[{i}].body is not a list")
    return problems
