"""Google Drive publishing of rendered assignments.

DocPublisher uploads plain text as a new Google Doc using Application Default
Credentials (service account) scoped to drive.file, then shares it as
"anyone with the link can view".
"""

from __future__ import annotations

import io
import logging
from typing import Any, Callable, Dict, Optional

import google.auth
from googleapiclient.discovery import build
from googleapiclient.http import MediaIoBaseUpload

from assignment_modifier.config import Config
from assignment_modifier.utils import PublishError, handle_api_error

GOOGLE_DOC_MIME_TYPE = "application/vnd.google-apps.document"
DEFAULT_TITLE = "Modified Assignment"


def build_drive_service() -> Any:
    """Build a Drive v3 client from Application Default Credentials."""
    creds, _ = google.auth.default(scopes=Config.DRIVE_SCOPES)
    return build("drive", "v3", credentials=creds, cache_discovery=False)


class DocPublisher:
    def __init__(self, service_factory: Optional[Callable[[], Any]] = None) -> None:
        self.service_factory = service_factory or build_drive_service

    def publish(self, text: str, title: Optional[str] = None) -> Dict[str, str]:
        """Create a Google Doc holding ``text`` and make it publicly readable.

        Returns {"docId": str, "url": str}. Any upstream failure, including
        missing credentials, is raised as PublishError.
        """
        name = title or DEFAULT_TITLE
        try:
            drive = self.service_factory()

            media = MediaIoBaseUpload(io.BytesIO(text.encode("utf-8")), mimetype="text/plain", resumable=False)
            file = drive.files().create(
                body={"name": name, "mimeType": GOOGLE_DOC_MIME_TYPE},
                media_body=media,
                fields="id, webViewLink",
            ).execute()

            file_id = file["id"]
            drive.permissions().create(
                fileId=file_id,
                body={"role": "reader", "type": "anyone"},
            ).execute()
        except Exception as e:
            raise PublishError(f"Failed to create Google Doc: {handle_api_error(e)['error']}") from e

        url = file.get("webViewLink") or f"https://docs.google.com/document/d/{file_id}/edit"
        logging.info(f"Published Google Doc {file_id} ({name!r})")
        return {"docId": file_id, "url": url}
