"""Test configuration file."""

import datetime
from pathlib import Path

import pytest
from pydantic import ValidationError

from nexus_reaper.config import ReaperConfig
from nexus_reaper.models.scan_mode import ScanMode


def test_config_from_file(support_dir: Path) -> None:
    """Test loading a config from a YAML file."""
    cfg = ReaperConfig.from_file(support_dir / "config.yaml")
    assert cfg.hosts == ["localhost:8000", "nexus.example.com:8081"]
    assert cfg.repositories == ["jts-release", "jts-snapshot"]
    assert cfg.paths == ["org/example/app/"]
    assert cfg.regexp == "-SNAPSHOT/$"
    assert cfg.age == datetime.timedelta(days=90)
    assert cfg.before is None
    assert cfg.mode == ScanMode.DELETE
    assert cfg.dry_run is True
    assert cfg.timeout == 30


def test_defaults() -> None:
    cfg = ReaperConfig()
    assert cfg.hosts == ["localhost:8000"]
    assert cfg.repositories == ["jts-release"]
    assert cfg.paths == [""]
    assert cfg.regexp == ".*"
    assert cfg.dry_run is True
    assert cfg.keep_going is False
    assert cfg.mode is None
    assert cfg.timeout is None


def test_empty_file(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    config.write_text("")
    assert ReaperConfig.from_file(config) == ReaperConfig()


def test_before_and_age() -> None:
    with pytest.raises(ValidationError):
        ReaperConfig(before="2024-01-05", age="30d")


def test_empty_before_is_unset() -> None:
    assert ReaperConfig(before="", age="1w").before is None


def test_bad_mode() -> None:
    with pytest.raises(ValidationError):
        ReaperConfig.model_validate({"mode": "obliterate"})
