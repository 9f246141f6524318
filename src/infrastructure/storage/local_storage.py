"""Local disk storage for uploaded files."""

from collections.abc import Iterable
from pathlib import Path

import structlog

logger = structlog.get_logger()


class LocalFileStorage:
    """Stores files flat under a single root directory.

    The root is created on the first write, not at construction.
    """

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    def resolve(self, name: str) -> Path | None:
        if not name or name in (".", ".."):
            return None
        root = self._root.resolve()
        candidate = (root / name).resolve()
        if candidate.parent != root:
            return None
        return candidate

    def exists(self, name: str) -> bool:
        path = self.resolve(name)
        return path is not None and path.is_file()

    def save(self, name: str, chunks: Iterable[bytes]) -> int:
        path = self.resolve(name)
        if path is None:
            raise ValueError(f"Invalid storage name: {name!r}")

        self._root.mkdir(parents=True, exist_ok=True)
        written = 0
        fh = path.open("xb")
        try:
            with fh:
                for chunk in chunks:
                    fh.write(chunk)
                    written += len(chunk)
        except BaseException:
            path.unlink(missing_ok=True)
            logger.debug("partial_file_removed", name=name, bytes_written=written)
            raise
        return written

    def delete(self, name: str) -> bool:
        path = self.resolve(name)
        if path is None or not path.is_file():
            return False
        path.unlink()
        return True
