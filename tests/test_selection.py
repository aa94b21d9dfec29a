"""Tests for latest-file selection."""

from pathlib import Path

import pytest

from file_manager.exceptions import EmptySetError
from file_manager.filesystem import FileRecord, pick_latest


def _record(name: str, modified_at: float) -> FileRecord:
    return FileRecord(
        name=name,
        path=Path("/data") / name,
        size_bytes=1,
        modified_at=modified_at,
        extension=Path(name).suffix.lstrip("."),
    )


class TestPickLatest:
    """Tests for pick_latest."""

    def test_greatest_timestamp_wins(self):
        files = [_record("a.svg", 10), _record("b.svg", 30), _record("c.svg", 20)]
        assert pick_latest(files).name == "b.svg"

    def test_tie_goes_to_first_seen(self):
        files = [_record("t1.svg", 100), _record("t2.svg", 200), _record("t3.svg", 200)]

        for _ in range(5):
            assert pick_latest(files).name == "t2.svg"

    def test_tie_order_follows_input(self):
        files = [_record("t1.svg", 100), _record("t3.svg", 200), _record("t2.svg", 200)]
        assert pick_latest(files).name == "t3.svg"

    def test_accepts_paths(self, tmp_path, make_file):
        old = make_file(tmp_path / "old.zip", mtime=1_000_000)
        new = make_file(tmp_path / "new.zip", mtime=2_000_000)

        latest = pick_latest([old, str(new)])

        assert latest.path == new
        assert latest.extension == "zip"

    def test_accepts_generators(self):
        latest = pick_latest(_record(f"{i}.svg", i) for i in range(3))
        assert latest.name == "2.svg"

    def test_empty_raises(self):
        with pytest.raises(EmptySetError):
            pick_latest([])
