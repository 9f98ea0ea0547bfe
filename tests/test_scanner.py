import os
from pathlib import Path

import pytest

from treecp import scanner
from treecp.scanner import scan_total_size


def _write(path: Path, content: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)


def test_scan_total_size_sums_nested_regular_files(tmp_path: Path) -> None:
    source = tmp_path / "src"
    _write(source / "a.txt", b"hello")
    _write(source / "nested" / "b.bin", b"\x01" * 1000)
    _write(source / "nested" / "deeper" / "c.txt", b"xyz")
    _write(source / "nested" / "empty.txt", b"")

    assert scan_total_size(source) == 5 + 1000 + 3


def test_scan_total_size_of_tree_without_files_is_zero(tmp_path: Path) -> None:
    source = tmp_path / "src"
    (source / "one" / "two").mkdir(parents=True)
    (source / "three").mkdir()

    assert scan_total_size(source) == 0


@pytest.mark.skipif(not hasattr(os, "symlink") or os.name == "nt", reason="symlinks need POSIX")
def test_scan_total_size_ignores_symlinks(tmp_path: Path) -> None:
    outside = tmp_path / "outside"
    _write(outside / "big.bin", b"\x00" * 4096)
    source = tmp_path / "src"
    _write(source / "small.txt", b"1234")
    os.symlink(outside / "big.bin", source / "big-link")
    os.symlink(outside, source / "outside-link")

    assert scan_total_size(source) == 4


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="FIFOs need POSIX")
def test_scan_total_size_ignores_fifos(tmp_path: Path) -> None:
    source = tmp_path / "src"
    _write(source / "data.txt", b"abc")
    os.mkfifo(source / "pipe")

    assert scan_total_size(source) == 3


def test_scan_total_size_rejects_file_root(tmp_path: Path) -> None:
    root = tmp_path / "file.txt"
    _write(root, b"not a dir")

    with pytest.raises(NotADirectoryError):
        scan_total_size(root)


def test_scan_total_size_rejects_missing_root(tmp_path: Path) -> None:
    with pytest.raises(NotADirectoryError):
        scan_total_size(tmp_path / "missing")


def test_scan_total_size_aborts_when_nested_directory_is_unreadable(tmp_path: Path, monkeypatch) -> None:
    source = tmp_path / "src"
    _write(source / "a.txt", b"abc")
    _write(source / "locked" / "deep" / "b.txt", b"defg")
    locked = source / "locked" / "deep"
    real_iter_entries = scanner.iter_entries

    def _iter_entries(directory: Path):
        if directory == locked:
            raise PermissionError(f"cannot open {directory}")
        return real_iter_entries(directory)

    monkeypatch.setattr(scanner, "iter_entries", _iter_entries)

    with pytest.raises(PermissionError):
        scan_total_size(source)
