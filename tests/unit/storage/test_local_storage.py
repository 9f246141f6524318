"""Unit tests for LocalFileStorage."""

from pathlib import Path

import pytest

from infrastructure.storage.local_storage import LocalFileStorage


class TestLocalFileStorage:
    def test_root_created_lazily(self, upload_root: Path, storage: LocalFileStorage):
        assert not upload_root.exists()

        written = storage.save("a.png", [b"ab", b"cd"])

        assert written == 4
        assert (upload_root / "a.png").read_bytes() == b"abcd"

    def test_exists_and_delete(self, storage: LocalFileStorage):
        storage.save("a.pdf", [b"%PDF"])

        assert storage.exists("a.pdf")
        assert storage.delete("a.pdf") is True
        assert not storage.exists("a.pdf")

    def test_delete_missing_returns_false(self, storage: LocalFileStorage):
        assert storage.delete("missing.png") is False

    def test_partial_file_removed_on_failure(
        self, upload_root: Path, storage: LocalFileStorage
    ):
        def chunks():
            yield b"first"
            raise RuntimeError("stream broke")

        with pytest.raises(RuntimeError):
            storage.save("broken.png", chunks())

        assert not (upload_root / "broken.png").exists()

    def test_refuses_to_overwrite(self, storage: LocalFileStorage):
        storage.save("a.png", [b"one"])

        with pytest.raises(FileExistsError):
            storage.save("a.png", [b"two"])

        assert storage.resolve("a.png").read_bytes() == b"one"

    @pytest.mark.parametrize("name", ["", ".", "..", "../secret.txt", "nested/a.png"])
    def test_resolve_rejects_names_outside_root(self, storage: LocalFileStorage, name: str):
        assert storage.resolve(name) is None

    def test_traversal_cannot_delete_outside_root(
        self, tmp_path: Path, storage: LocalFileStorage
    ):
        outside = tmp_path / "secret.txt"
        outside.write_text("keep me")
        storage.save("a.png", [b"x"])

        assert storage.delete("../secret.txt") is False
        assert outside.exists()

    def test_save_rejects_bad_name(self, storage: LocalFileStorage):
        with pytest.raises(ValueError):
            storage.save("../escape.png", [b"x"])
