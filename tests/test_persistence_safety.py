"""Tests for persistence safety features (backups, atomic writes, corruption handling)."""

import json
from pathlib import Path

import pytest

from pillcolor.exceptions import ConfigFileInvalidError, ConfigValidationError
from pillcolor.models import AppConfig, ClassifierThresholds
from pillcolor.utils import PydanticPersistence


def _config(white_value: float) -> AppConfig:
    return AppConfig(thresholds=ClassifierThresholds(white_value=white_value))


class TestPersistenceSafety:
    """Test safety features of PydanticPersistence."""

    def test_save_creates_backup(self, tmp_path: Path):
        """Test that save_json creates a .bak file before overwriting."""
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(_config(81), config_path, backup=False)
        PydanticPersistence.save_json(_config(95), config_path, backup=True)

        backup_path = config_path.with_suffix(".json.bak")
        assert backup_path.exists()

        backup_data = PydanticPersistence.load_json(backup_path, AppConfig)
        assert backup_data.thresholds.white_value == 81

        current_data = PydanticPersistence.load_json(config_path, AppConfig)
        assert current_data.thresholds.white_value == 95

    def test_save_without_backup(self, tmp_path: Path):
        """Test that backup can be disabled."""
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(_config(81), config_path, backup=False)
        PydanticPersistence.save_json(_config(95), config_path, backup=False)

        assert not config_path.with_suffix(".json.bak").exists()

    def test_atomic_write_cleans_up_temp_file(self, tmp_path: Path):
        """Test that temporary file is cleaned up after successful write."""
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(AppConfig(), config_path)

        assert not config_path.with_suffix(".json.tmp").exists()
        assert PydanticPersistence.load_json(config_path, AppConfig) == AppConfig()

    def test_save_creates_parent_directories(self, tmp_path: Path):
        config_path = tmp_path / "nested" / "dir" / "config.json"
        PydanticPersistence.save_json(AppConfig(), config_path)
        assert config_path.exists()

    def test_failed_write_keeps_original(self, tmp_path: Path, monkeypatch):
        """A failing write leaves the previous file and no temp file behind."""
        config_path = tmp_path / "config.json"
        PydanticPersistence.save_json(_config(81), config_path)

        def broken_replace(self, target):
            raise OSError("disk full")

        monkeypatch.setattr(Path, "replace", broken_replace)
        with pytest.raises(OSError):
            PydanticPersistence.save_json(_config(95), config_path)

        assert not config_path.with_suffix(".json.tmp").exists()
        assert PydanticPersistence.load_json(config_path, AppConfig).thresholds.white_value == 81

    def test_load_json_or_default_missing_file(self, tmp_path: Path):
        """Test load_json_or_default with missing file."""
        config_path = tmp_path / "missing.json"

        result = PydanticPersistence.load_json_or_default(config_path, AppConfig)

        assert result == AppConfig()
        assert not config_path.exists()

    def test_load_json_or_default_corrupted_file_raises(self, tmp_path: Path):
        """A corrupt file is reported, not replaced by defaults."""
        config_path = tmp_path / "corrupted.json"
        config_path.write_text("{ invalid }", encoding="utf-8")

        with pytest.raises(ConfigFileInvalidError):
            PydanticPersistence.load_json_or_default(config_path, AppConfig)
        assert config_path.read_text() == "{ invalid }"

    def test_out_of_range_threshold_raises(self, tmp_path: Path):
        config_path = tmp_path / "invalid_values.json"
        config_path.write_text(json.dumps({"thresholds": {"black_value": 250}}), encoding="utf-8")

        with pytest.raises(ConfigValidationError) as exc_info:
            PydanticPersistence.load_json(config_path, AppConfig)
        assert exc_info.value.field == "thresholds.black_value"

    def test_load_empty_file(self, tmp_path: Path):
        config_path = tmp_path / "empty.json"
        config_path.write_text("  \n", encoding="utf-8")

        with pytest.raises(ConfigFileInvalidError) as exc_info:
            PydanticPersistence.load_json(config_path, AppConfig)
        assert exc_info.value.detail == "file is empty"

    def test_load_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            PydanticPersistence.load_json(tmp_path / "nope.json", AppConfig)
