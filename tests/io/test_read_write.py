"""Tests for atomic table writes and table reads in `refgraph.io`."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from refgraph.core.encoder import encode
from refgraph.core.errors import MalformedTable
from refgraph.core.table import Table
from refgraph.io.config import CodecSettings
from refgraph.io.errors import IoReadError, IoWriteError
from refgraph.io.read import read_table
from refgraph.io.write import write_table


def test_write_then_read_table(tmp_path: Path) -> None:
    x: dict = {"a": 1}
    x["b"] = x
    table = encode(x)
    dest = tmp_path / "nested" / "table.json"

    final = write_table(dest, table)

    assert final == str(dest)
    assert dest.read_text(encoding="utf-8") == '{"root":0,"obj":[{"a":1,"b":0},1]}'
    assert not os.path.exists(str(dest) + ".tmp")
    assert read_table(dest) == table


def test_write_respects_indent_setting(tmp_path: Path) -> None:
    dest = tmp_path / "pretty.json"

    write_table(dest, Table(root=0, entries=[[0]]), CodecSettings(indent=2))

    assert dest.read_text(encoding="utf-8").startswith('{\n  "root": 0')


def test_write_replaces_existing_file(tmp_path: Path) -> None:
    dest = tmp_path / "t.json"
    dest.write_text("old")

    write_table(dest, Table(root=0, entries=["new"]))

    assert read_table(dest).entries == ["new"]


def test_write_failure_cleans_tmp(tmp_path: Path) -> None:
    # Destination is an existing directory, so the final rename fails.
    dest = tmp_path / "occupied"
    dest.mkdir()

    with pytest.raises(IoWriteError):
        write_table(dest, Table(root=0, entries=[1]))

    assert not os.path.exists(str(dest) + ".tmp")


def test_write_serialization_failure(tmp_path: Path) -> None:
    dest = tmp_path / "nan.json"

    with pytest.raises(IoWriteError):
        write_table(dest, encode(float("nan")))

    assert not dest.exists()


def test_read_missing_file(tmp_path: Path) -> None:
    with pytest.raises(IoReadError):
        read_table(tmp_path / "missing.json")


def test_read_malformed_content(tmp_path: Path) -> None:
    src = tmp_path / "bad.json"
    src.write_text('{"root": 0, "entries": "nope"}', encoding="utf-8")

    with pytest.raises(MalformedTable):
        read_table(src)


def test_read_enforces_max_entries(tmp_path: Path) -> None:
    src = tmp_path / "big.json"
    write_table(src, encode([1, 2, 3]))

    with pytest.raises(MalformedTable, match="max_entries=2"):
        read_table(src, CodecSettings(max_entries=2))
    assert len(read_table(src, CodecSettings(max_entries=4))) == 4
