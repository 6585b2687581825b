"""
Blob Store

Resume file storage with shareable, public-read links.

Backends:
- DriveBlobStore: Google Drive folder (production)
- MemoryBlobStore: in-process dict (local development and tests)
"""

import asyncio
import io
import logging
from typing import Any, Protocol

from googleapiclient.http import MediaIoBaseUpload

from app.core.config import settings
from app.core.google import build_drive, load_credentials

logger = logging.getLogger(__name__)

DRIVE_SHARE_URL = "https://drive.google.com/file/d/{file_id}/view?usp=sharing"


class BlobStore(Protocol):
    """Upload contract shared by all backends."""

    async def upload_public(self, name: str, content: bytes, content_type: str) -> str:
        """Store a file readable by anyone with the link and return the link."""
        ...


class MemoryBlobStore:
    """In-process blob store. Links are not resolvable outside the process."""

    def __init__(self) -> None:
        self.files: dict[str, tuple[str, bytes, str]] = {}

    async def upload_public(self, name: str, content: bytes, content_type: str) -> str:
        file_id = f"blob{len(self.files) + 1}"
        self.files[file_id] = (name, content, content_type)
        return f"memory://blobs/{file_id}"


class DriveBlobStore:
    """Blob store backed by a Google Drive folder."""

    def __init__(self, credentials: Any, folder_id: str) -> None:
        self._credentials = credentials
        self._folder_id = folder_id

    def _upload_sync(self, name: str, content: bytes, content_type: str) -> str:
        drive = build_drive(self._credentials)
        media = MediaIoBaseUpload(io.BytesIO(content), mimetype=content_type, resumable=False)
        created = (
            drive.files()
            .create(
                body={"name": name, "mimeType": content_type, "parents": [self._folder_id]},
                media_body=media,
                fields="id",
            )
            .execute()
        )
        file_id = created["id"]

        drive.permissions().create(
            fileId=file_id,
            body={"role": "reader", "type": "anyone"},
        ).execute()

        return DRIVE_SHARE_URL.format(file_id=file_id)

    async def upload_public(self, name: str, content: bytes, content_type: str) -> str:
        # Run sync Google client calls in thread pool to avoid blocking event loop
        return await asyncio.to_thread(self._upload_sync, name, content, content_type)


# Process-wide store instance
blob_store: BlobStore | None = None


def init_blob_store() -> BlobStore:
    """
    Create the blob store selected by BLOB_BACKEND.

    Call this on application startup.
    """
    global blob_store

    if settings.blob_backend == "drive":
        credentials = load_credentials(settings.google_credentials)
        blob_store = DriveBlobStore(credentials, settings.drive_folder_id)
    else:
        logger.warning("Using in-memory blob store - resumes are lost on restart")
        blob_store = MemoryBlobStore()

    return blob_store


async def get_blob_store() -> BlobStore:
    """Get the blob store instance (FastAPI dependency)."""
    if blob_store is None:
        raise RuntimeError("Blob store is not initialized")
    return blob_store


def close_blob_store() -> None:
    """Drop the blob store instance."""
    global blob_store
    blob_store = None
