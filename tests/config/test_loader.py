from __future__ import annotations

import json

from result import Err, Ok

from sizefmt.config.loader import load_config, sample_config_json
from tests.fs_mock import MemoryFileSystem


def test_load_config_missing_uses_defaults() -> None:
    fs = MemoryFileSystem()
    result = load_config(path="/missing.json", fs=fs)
    assert isinstance(result, Ok)
    cfg = result.unwrap()
    assert cfg.prefixes == "si"
    assert cfg.precision is None
    assert [table.name for table in cfg.custom_prefixes] == ["millimeter"]


def test_load_config_default_path_is_expanded() -> None:
    fs = MemoryFileSystem().add_file(
        "/mock/home/.config/sizefmt/config.json", content=json.dumps({"prefixes": "binary"})
    )
    result = load_config(fs=fs)
    assert isinstance(result, Ok)
    assert result.unwrap().prefixes == "binary"


def test_load_config_invalid_returns_warning() -> None:
    fs = MemoryFileSystem().add_file("/config.json", content="not-json")
    result = load_config(path="/config.json", fs=fs)
    assert isinstance(result, Err)
    warning = result.unwrap_err()
    assert "failed reading config" in warning.lower()


def test_load_config_non_object_rejected() -> None:
    fs = MemoryFileSystem().add_file("/config.json", content="[1, 2]")
    result = load_config(path="/config.json", fs=fs)
    assert isinstance(result, Err)
    assert "must be a JSON object" in result.unwrap_err()


def test_load_config_bad_prefix_table_returns_warning() -> None:
    payload = {"customPrefixes": [{"name": "flat", "base": 1, "labels": [""]}]}
    fs = MemoryFileSystem().add_file("/config.json", content=json.dumps(payload))
    result = load_config(path="/config.json", fs=fs)
    assert isinstance(result, Err)
    assert "greater than 1" in result.unwrap_err()


def test_load_config_reads_values() -> None:
    payload = {
        "prefixes": "seconds",
        "separator": "comma",
        "precision": 3,
        "suffix": "",
        "width": 32,
        "customPrefixes": [{"name": "seconds", "base": 60, "labels": ["s", "min", "h"]}],
    }
    fs = MemoryFileSystem().add_file("/config.json", content=json.dumps(payload))
    cfg = load_config(path="/config.json", fs=fs).unwrap()
    assert cfg.prefixes == "seconds"
    assert cfg.separator == "comma"
    assert cfg.precision == 3
    assert cfg.suffix == ""
    assert cfg.width == 32
    assert cfg.custom_prefixes[0].labels == ("s", "min", "h")


def test_sample_config_round_trips_through_loader() -> None:
    fs = MemoryFileSystem().add_file("/config.json", content=sample_config_json())
    result = load_config(path="/config.json", fs=fs)
    assert isinstance(result, Ok)
    assert result.unwrap().custom_prefixes[0].name == "millimeter"
