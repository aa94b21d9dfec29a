"""Tests for create/move/copy operations."""

import pytest

from file_manager.exceptions import NotFoundError, WriteFailedError
from file_manager.filesystem import copy_file, create_directory, move_file


class TestCreateDirectory:
    """Tests for create_directory."""

    def test_creates_with_parents(self, tmp_path):
        assert create_directory(tmp_path / "a" / "b") is True
        assert (tmp_path / "a" / "b").is_dir()

    def test_existing_directory(self, tmp_path):
        (tmp_path / "a").mkdir()
        assert create_directory(tmp_path / "a") is False

    def test_path_taken_by_file(self, tmp_path, make_file):
        make_file(tmp_path / "a")
        with pytest.raises(WriteFailedError):
            create_directory(tmp_path / "a")


class TestMoveFile:
    """Tests for move_file."""

    def test_move_into_new_directory(self, tmp_path, make_file):
        source = make_file(tmp_path / "report.pdf", content=b"pdf")

        final = move_file(source, tmp_path / "dest" / "sub")

        assert final == tmp_path / "dest" / "sub" / "report.pdf"
        assert final.read_bytes() == b"pdf"
        assert not source.exists()

    def test_never_overwrites(self, tmp_path, make_file):
        source = make_file(tmp_path / "src" / "report.pdf", content=b"new")
        make_file(tmp_path / "dest" / "report.pdf", content=b"old")

        final = move_file(source, tmp_path / "dest")

        assert final.name == "report_1.pdf"
        assert (tmp_path / "dest" / "report.pdf").read_bytes() == b"old"
        assert final.read_bytes() == b"new"

    def test_missing_source(self, tmp_path):
        with pytest.raises(NotFoundError):
            move_file(tmp_path / "ghost.txt", tmp_path / "dest")

    def test_destination_is_a_file(self, tmp_path, make_file):
        source = make_file(tmp_path / "a.txt")
        make_file(tmp_path / "blocker")

        with pytest.raises(WriteFailedError):
            move_file(source, tmp_path / "blocker")


class TestCopyFile:
    """Tests for copy_file."""

    def test_copy_keeps_source_and_mtime(self, tmp_path, make_file):
        source = make_file(tmp_path / "a.svg", content=b"<svg/>", mtime=1_500_000)

        final = copy_file(source, tmp_path / "copies")

        assert source.exists()
        assert final.read_bytes() == b"<svg/>"
        assert int(final.stat().st_mtime) == 1_500_000

    def test_copy_twice(self, tmp_path, make_file):
        source = make_file(tmp_path / "a.svg")

        first = copy_file(source, tmp_path / "copies")
        second = copy_file(source, tmp_path / "copies")

        assert first.name == "a.svg"
        assert second.name == "a_1.svg"
