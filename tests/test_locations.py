"""Tests for location token resolution."""

from pathlib import Path

import pytest

from file_manager.filesystem import LocationResolver
from file_manager.settings import LocationRoots


@pytest.fixture
def resolver():
    return LocationResolver(
        LocationRoots(downloads=Path("/home/u/Downloads"), documents=Path("/home/u/Documents"))
    )


class TestResolve:
    """Tests for LocationResolver.resolve."""

    @pytest.mark.parametrize("token,expected", [
        ("downloads", "/home/u/Downloads"),
        ("Downloads", "/home/u/Downloads"),
        ("DOCUMENTS", "/home/u/Documents"),
        ("documents", "/home/u/Documents"),
        ("documents/Icons", "/home/u/Documents/Icons"),
        ("documents\\Icons", "/home/u/Documents/Icons"),
        ("Documents/Projects/Icons", "/home/u/Documents/Projects/Icons"),
        ("downloads/project", "/home/u/Downloads/project"),
        ("documents//etc", "/home/u/Documents/etc"),
        ("downloads/\\\\x", "/home/u/Downloads/x"),
    ])
    def test_keywords(self, resolver, token, expected):
        assert resolver.resolve(token) == Path(expected)

    def test_is_deterministic(self, resolver):
        assert resolver.resolve("documents/a/b") == resolver.resolve("documents/a/b")

    def test_absolute_path_is_kept(self, resolver, tmp_path):
        assert resolver.resolve(str(tmp_path)) == tmp_path

    def test_relative_path_uses_working_directory(self, resolver, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert resolver.resolve("somewhere") == tmp_path / "somewhere"

    def test_keyword_must_be_whole_segment(self, resolver, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert resolver.resolve("documentsx") == tmp_path / "documentsx"

    def test_does_not_check_existence(self, resolver):
        assert resolver.resolve("/does/not/exist") == Path("/does/not/exist")


class TestResolveFolder:
    """Tests for destination folder resolution."""

    def test_empty_is_documents_root(self, resolver):
        assert resolver.resolve_folder("") == Path("/home/u/Documents")
        assert resolver.resolve_folder(None) == Path("/home/u/Documents")

    def test_plain_name_is_documents_subfolder(self, resolver):
        assert resolver.resolve_folder("DoorHanger") == Path("/home/u/Documents/DoorHanger")
        assert resolver.resolve_folder("Projects/Icons") == Path("/home/u/Documents/Projects/Icons")

    def test_reserved_token(self, resolver):
        assert resolver.resolve_folder("downloads/sorted") == Path("/home/u/Downloads/sorted")

    def test_absolute_path(self, resolver):
        assert resolver.resolve_folder("/srv/files") == Path("/srv/files")

    def test_other_default_root(self, resolver):
        assert resolver.resolve_folder("x", Path("/tmp/root")) == Path("/tmp/root/x")
