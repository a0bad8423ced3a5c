"""Tests for archive naming and retention sweeps."""
from __future__ import annotations

import errno
import os
from datetime import date, timedelta
from pathlib import Path

import pytest

from dailyrotate.errors import InvalidRetentionError
from dailyrotate.retention import (
    UNLIMITED,
    archive_name,
    is_family_member,
    protected_names,
    sweep_archives,
    validate_retention,
)

_TODAY = date(2024, 3, 10)


def _archive(directory: Path, days_ago: int, basename: str = "app.log") -> Path:
    path = directory / archive_name(basename, _TODAY - timedelta(days=days_ago))
    path.write_bytes(b"x")
    return path


# ---------------------------------------------------------------------------
# validate_retention
# ---------------------------------------------------------------------------


class TestValidateRetention:
    @pytest.mark.parametrize("value", [0, 1, 7, 365])
    def test_day_counts_accepted(self, value: int) -> None:
        assert validate_retention(value) == value

    def test_unlimited_accepted(self) -> None:
        assert validate_retention(UNLIMITED) is None

    @pytest.mark.parametrize("value", [-1, -7, 1.5, "3", True])
    def test_invalid_values_rejected(self, value: object) -> None:
        with pytest.raises(InvalidRetentionError) as exc_info:
            validate_retention(value)
        assert exc_info.value.retention == value


# ---------------------------------------------------------------------------
# Naming
# ---------------------------------------------------------------------------


class TestNaming:
    def test_archive_name_is_zero_padded(self) -> None:
        assert archive_name("app.log", date(2024, 3, 9)) == "2024-03-09-app.log"

    def test_protected_names_cover_today_and_retention_days(self) -> None:
        names = protected_names("app.log", 2, _TODAY)
        assert names == {
            "2024-03-10-app.log",
            "2024-03-09-app.log",
            "2024-03-08-app.log",
        }

    def test_protected_names_cross_month_boundary(self) -> None:
        names = protected_names("app.log", 1, date(2024, 3, 1))
        assert "2024-02-29-app.log" in names

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("2024-03-01-app.log", True),
            ("garbage-app.log", True),
            ("app.log", False),
            (".2024-03-01-app.log", False),
            ("app.log.1", False),
            ("2024-03-01-other.log", False),
        ],
    )
    def test_family_membership(self, name: str, expected: bool) -> None:
        assert is_family_member(name, "app.log") is expected


# ---------------------------------------------------------------------------
# sweep_archives
# ---------------------------------------------------------------------------


class TestSweepArchives:
    def test_keeps_window_and_removes_older(self, tmp_path: Path) -> None:
        archives = {days: _archive(tmp_path, days) for days in range(7)}
        sweep_archives(str(tmp_path), "app.log", 3, _TODAY)
        for days, path in archives.items():
            assert path.exists() is (days <= 3), days

    def test_gaps_do_not_extend_window(self, tmp_path: Path) -> None:
        kept = _archive(tmp_path, 5)
        removed = _archive(tmp_path, 6)
        very_old = _archive(tmp_path, 40)
        sweep_archives(str(tmp_path), "app.log", 5, _TODAY)
        assert kept.exists()
        assert not removed.exists()
        assert not very_old.exists()

    def test_zero_retention_keeps_only_today(self, tmp_path: Path) -> None:
        today = _archive(tmp_path, 0)
        yesterday = _archive(tmp_path, 1)
        sweep_archives(str(tmp_path), "app.log", 0, _TODAY)
        assert today.exists()
        assert not yesterday.exists()

    def test_unrelated_files_survive(self, tmp_path: Path) -> None:
        survivors = [
            tmp_path / "app.log",
            tmp_path / ".2001-01-01-app.log",
            tmp_path / "other.txt",
            tmp_path / "app.log.bak",
            tmp_path / "2001-01-01-other.log",
        ]
        for path in survivors:
            path.write_bytes(b"x")
        doomed = tmp_path / "2001-01-01-app.log"
        doomed.write_bytes(b"x")

        sweep_archives(str(tmp_path), "app.log", 3, _TODAY)

        assert all(path.exists() for path in survivors)
        assert not doomed.exists()

    def test_undated_family_member_removed(self, tmp_path: Path) -> None:
        stray = tmp_path / "copy-of-app.log"
        stray.write_bytes(b"x")
        sweep_archives(str(tmp_path), "app.log", 3, _TODAY)
        assert not stray.exists()

    def test_keep_protects_extra_names(self, tmp_path: Path) -> None:
        old = _archive(tmp_path, 30)
        sweep_archives(str(tmp_path), "app.log", 3, _TODAY, keep=[old.name])
        assert old.exists()

    def test_returns_removed_paths(self, tmp_path: Path) -> None:
        old = _archive(tmp_path, 10)
        _archive(tmp_path, 1)
        removed = sweep_archives(str(tmp_path), "app.log", 3, _TODAY)
        assert removed == [str(old)]

    def test_subdirectories_not_scanned(self, tmp_path: Path) -> None:
        nested_dir = tmp_path / "nested"
        nested_dir.mkdir()
        nested = _archive(nested_dir, 30)
        sweep_archives(str(tmp_path), "app.log", 3, _TODAY)
        assert nested.exists()

    def test_first_failure_aborts_without_rollback(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        first = _archive(tmp_path, 20)
        second = _archive(tmp_path, 21)
        real_remove = os.remove
        calls: list[str] = []

        def flaky_remove(path: str) -> None:
            calls.append(path)
            if len(calls) > 1:
                raise PermissionError(errno.EACCES, "denied", path)
            real_remove(path)

        monkeypatch.setattr(os, "remove", flaky_remove)
        with pytest.raises(PermissionError):
            sweep_archives(str(tmp_path), "app.log", 3, _TODAY)

        assert len(calls) == 2
        assert [first.exists(), second.exists()].count(True) == 1

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            sweep_archives(str(tmp_path / "missing"), "app.log", 3, _TODAY)
