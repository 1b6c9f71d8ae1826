"""Google Docs plain-text fetching.

DocFetcher responsibilities:
- Extract the document ID from a Google Docs URL
- Download the public plain-text export of that document
- Turn every failure into a typed exception the HTTP layer can report
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from assignment_modifier.config import Config
from assignment_modifier.utils import (
    DocumentFetchError,
    EmptyDocumentError,
    InvalidUrlError,
    extract_doc_id,
)

# How much of an error body is echoed back to the caller
EXCERPT_CHARS = 200


class DocFetcher:
    """Single-attempt fetcher for publicly shared Google Docs."""

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        # Plain requests module unless a session is injected
        self.http = session or requests

    def export_url(self, doc_id: str) -> str:
        return Config.DOC_EXPORT_URL.format(doc_id=doc_id)

    def fetch_text(self, url: str) -> str:
        """Fetch the plain-text content of the Google Doc at ``url``.

        Raises:
            InvalidUrlError: no document ID in the URL; nothing is fetched.
            DocumentFetchError: network failure or non-success HTTP status.
            EmptyDocumentError: the export is empty or whitespace-only.
        """
        doc_id = extract_doc_id(url)
        if not doc_id:
            raise InvalidUrlError("Could not extract Google Doc ID from URL.")

        export_url = self.export_url(doc_id)
        try:
            resp = self.http.get(export_url)
        except requests.RequestException as e:
            raise DocumentFetchError(f"Failed to fetch Google Doc: {e}") from e

        status = resp.status_code
        if not 200 <= status < 300:
            excerpt = (resp.text or "")[:EXCERPT_CHARS]
            raise DocumentFetchError(
                f"Failed to fetch Google Doc. Status {status}. "
                f"Check that sharing is set to 'Anyone with the link can view'. {excerpt}".rstrip(),
                upstream_status=status,
                excerpt=excerpt,
            )

        # The txt export starts with a UTF-8 BOM, which str.strip() keeps
        text = (resp.text or "").lstrip("\ufeff")
        if not text.strip():
            raise EmptyDocumentError("Google Doc appears to be empty or not accessible as text.")

        logging.info(f"Fetched Google Doc {doc_id} ({len(text)} chars)")
        return text
