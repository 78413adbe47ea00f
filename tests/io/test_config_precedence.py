from __future__ import annotations

from pathlib import Path

import pytest

from refgraph.io.config import CodecSettings
from refgraph.io.errors import IoConfigError

_ENV_KEYS = [
    "REFGRAPH_INDENT",
    "REFGRAPH_ENSURE_ASCII",
    "REFGRAPH_ALLOW_NAN",
    "REFGRAPH_REDUCE_OBJECTS",
    "REFGRAPH_MAX_ENTRIES",
    "REFGRAPH_ENCODING",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def _write_refgraph_toml(tmp: Path, content: str) -> Path:
    p = tmp / "refgraph.toml"
    p.write_text(content)
    return p


def test_settings_precedence_env_over_toml(tmp_path: Path, monkeypatch) -> None:
    _write_refgraph_toml(
        tmp_path,
        """
        [codec]
        indent = 4
        allow_nan = true
        max_entries = 100
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("REFGRAPH_INDENT", "none")
    monkeypatch.setenv("REFGRAPH_MAX_ENTRIES", "10")

    s = CodecSettings.load()

    assert s.indent is None  # env override
    assert s.max_entries == 10  # env override
    assert s.allow_nan is True  # from TOML


def test_settings_from_toml_top_level_keys(tmp_path: Path, monkeypatch) -> None:
    _write_refgraph_toml(tmp_path, 'ensure_ascii = true\nreduce_objects = false\nencoding = "latin-1"\n')
    monkeypatch.chdir(tmp_path)

    s = CodecSettings.load()

    assert s.ensure_ascii is True
    assert s.reduce_objects is False
    assert s.encoding == "latin-1"


def test_settings_from_pyproject_tool_table(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "pyproject.toml").write_text(
        """
        [project]
        name = "demo"

        [tool.refgraph.codec]
        indent = 2
        """.strip()
    )
    monkeypatch.chdir(tmp_path)

    assert CodecSettings.load().indent == 2


def test_settings_explicit_path(tmp_path: Path) -> None:
    p = tmp_path / "custom.toml"
    p.write_text("[codec]\nmax_entries = 7\n")

    assert CodecSettings.from_toml(p).max_entries == 7


def test_settings_defaults_when_no_config(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    s = CodecSettings.load()

    assert s == CodecSettings()
    assert s.indent is None
    assert s.reduce_objects is True
    assert s.max_entries == 0
    assert s.encoding == "utf-8"


def test_settings_ignore_unparsable_values(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("REFGRAPH_INDENT", "wide")
    monkeypatch.setenv("REFGRAPH_MAX_ENTRIES", "lots")

    s = CodecSettings.load()

    assert s.indent is None
    assert s.max_entries == 0


@pytest.mark.parametrize("name,value", [("REFGRAPH_INDENT", "-1"), ("REFGRAPH_MAX_ENTRIES", "-5")])
def test_settings_load_rejects_negative_values(
    tmp_path: Path, monkeypatch, name: str, value: str
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(name, value)

    with pytest.raises(IoConfigError):
        CodecSettings.load()
