"""Upload service: validates, stores and removes uploaded files."""

import uuid
from collections.abc import Iterator
from pathlib import Path, PurePath
from typing import BinaryIO

import structlog

from core.exceptions import (
    MissingFileError,
    PayloadTooLargeError,
    UnsupportedFileTypeError,
    UploadNotFoundError,
)
from domain.entities.stored_file import StoredFile
from domain.repositories.file_storage import IFileStorage

logger = structlog.get_logger()

CHUNK_SIZE = 64 * 1024

# Extension -> content types accepted with it. Both must match.
ALLOWED_TYPES: dict[str, frozenset[str]] = {
    ".jpg": frozenset({"image/jpeg"}),
    ".jpeg": frozenset({"image/jpeg"}),
    ".png": frozenset({"image/png"}),
    ".gif": frozenset({"image/gif"}),
    ".pdf": frozenset({"application/pdf"}),
}


def is_allowed(filename: str, content_type: str | None) -> bool:
    ext = PurePath(filename).suffix.lower()
    allowed = ALLOWED_TYPES.get(ext)
    if allowed is None or not content_type:
        return False
    return content_type.split(";", 1)[0].strip().lower() in allowed


class UploadService:
    """Service for the upload lifecycle. Never touches the profile."""

    def __init__(self, storage: IFileStorage, max_bytes: int) -> None:
        self._storage = storage
        self._max_bytes = max_bytes

    def store(
        self,
        field: str,
        filename: str | None,
        content_type: str | None,
        stream: BinaryIO | None,
    ) -> StoredFile:
        """Validate and persist one uploaded file.

        Raises:
            MissingFileError: no file was sent in ``field``.
            UnsupportedFileTypeError: extension or content type not allowed.
            PayloadTooLargeError: more than ``max_bytes``; nothing is kept.
        """
        if stream is None or not filename:
            raise MissingFileError(field)
        if not is_allowed(filename, content_type):
            logger.info(
                "upload_rejected",
                reason="unsupported_type",
                filename=filename,
                content_type=content_type,
            )
            raise UnsupportedFileTypeError(filename, content_type)

        name = f"{uuid.uuid4().hex}{PurePath(filename).suffix.lower()}"
        size = self._storage.save(name, self._read_limited(stream))
        stored = StoredFile(
            name=name,
            original_filename=filename,
            size=size,
            content_type=content_type or "",
        )
        logger.info("file_uploaded", field=field, name=name, size=size)
        return stored

    def delete(self, name: str) -> None:
        """Delete a stored file.

        Profile fields still pointing at the file are left as they are.
        """
        if not self._storage.delete(name):
            raise UploadNotFoundError(name)
        logger.info("file_deleted", name=name)

    def locate(self, name: str) -> Path:
        """Return the on-disk path of a stored file."""
        path = self._storage.resolve(name)
        if path is None or not self._storage.exists(name):
            raise UploadNotFoundError(name)
        return path

    def _read_limited(self, stream: BinaryIO) -> Iterator[bytes]:
        total = 0
        while chunk := stream.read(CHUNK_SIZE):
            total += len(chunk)
            if total > self._max_bytes:
                logger.info("upload_rejected", reason="too_large", max_bytes=self._max_bytes)
                raise PayloadTooLargeError(self._max_bytes)
            yield chunk
