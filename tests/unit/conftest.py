"""Shared fixtures for unit tests."""

from collections.abc import Iterable
from pathlib import Path

import pytest


class FakeFileStorage:
    """In-memory stand-in for the file storage port."""

    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}
        self.save_calls = 0

    def save(self, name: str, chunks: Iterable[bytes]) -> int:
        self.save_calls += 1
        buffer = bytearray()
        for chunk in chunks:
            buffer.extend(chunk)
        self.files[name] = bytes(buffer)
        return len(buffer)

    def delete(self, name: str) -> bool:
        return self.files.pop(name, None) is not None

    def exists(self, name: str) -> bool:
        return name in self.files

    def resolve(self, name: str) -> Path | None:
        if "/" in name or name in ("", ".", ".."):
            return None
        return Path("/fake") / name


@pytest.fixture
def fake_storage() -> FakeFileStorage:
    """Create a fresh FakeFileStorage."""
    return FakeFileStorage()
