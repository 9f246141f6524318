"""File storage protocol."""

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol


class IFileStorage(Protocol):
    """Storage port for uploaded files, addressed by generated name."""

    def save(self, name: str, chunks: Iterable[bytes]) -> int:
        """Write chunks under name and return the number of bytes written."""
        ...

    def delete(self, name: str) -> bool:
        """Delete a file; False when it does not exist."""
        ...

    def exists(self, name: str) -> bool:
        """Check whether a file is stored under name."""
        ...

    def resolve(self, name: str) -> Path | None:
        """Map name to a path inside the storage root, or None if it escapes."""
        ...
