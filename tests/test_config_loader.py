"""Unit tests for YAML configuration loading."""
from pathlib import Path

import pytest

from sheetmatch.config_loader import ConfigLoader, MatcherConfig


class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_loads_values(self, write_file, tmp_path):
        write_file("config.yaml", (
            "use_fuzzy: true\n"
            "fuzzy_threshold: 25\n"
            "export_dir: out\n"
            "log_level: debug\n"
            "json_logs: false\n"
            "csv_delimiter: ';'\n"
        ))

        config = ConfigLoader(tmp_path).load()

        assert config.use_fuzzy is True
        assert config.fuzzy_threshold == 25
        assert config.export_dir == Path("out")
        assert config.log_level == "DEBUG"
        assert config.json_logs is False
        assert config.csv_delimiter == ";"
        assert config.csv_encoding == "utf-8"

    def test_missing_keys_use_defaults(self, write_file, tmp_path):
        write_file("config.yaml", "")
        assert ConfigLoader(tmp_path).load() == MatcherConfig()

    @pytest.mark.parametrize("raw, expected", [(150, 100), (-5, 0), (0, 0), (100, 100)])
    def test_threshold_is_clamped(self, write_file, tmp_path, raw, expected):
        write_file("config.yaml", f"fuzzy_threshold: {raw}\n")
        assert ConfigLoader(tmp_path).load().fuzzy_threshold == expected

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigLoader(tmp_path).load()

    def test_load_or_default_without_file(self, tmp_path):
        assert ConfigLoader(tmp_path).load_or_default() == MatcherConfig()

    def test_non_mapping_raises(self, write_file, tmp_path):
        write_file("config.yaml", "- a\n- b\n")
        with pytest.raises(ValueError):
            ConfigLoader(tmp_path).load()

    def test_cache_until_cleared(self, write_file, tmp_path):
        write_file("config.yaml", "fuzzy_threshold: 10\n")
        loader = ConfigLoader(tmp_path)
        assert loader.load().fuzzy_threshold == 10

        write_file("config.yaml", "fuzzy_threshold: 40\n")
        assert loader.load().fuzzy_threshold == 10

        loader.clear_cache()
        assert loader.load().fuzzy_threshold == 40
