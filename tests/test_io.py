from __future__ import annotations

from pathlib import Path

import pytest

from hexi.core.io import load_buffer


def test_reads_whole_file(tmp_path: Path) -> None:
    data = bytes(i % 256 for i in range(5000))
    p = tmp_path / "fixture.bin"
    p.write_bytes(data)
    assert load_buffer(p) == data
    assert load_buffer(str(p)) == data


def test_empty_file(tmp_path: Path) -> None:
    p = tmp_path / "empty.bin"
    p.write_bytes(b"")
    assert load_buffer(p) == b""


def test_file_not_found(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_buffer(tmp_path / "missing.bin")


def test_directory_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(IsADirectoryError):
        load_buffer(tmp_path)
