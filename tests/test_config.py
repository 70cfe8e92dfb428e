"""Tests for configuration loading."""

import logging
from unittest.mock import patch

from daybook.config import DATA_DIR, Config, load_config
from daybook.core.navigation import MONDAY, SUNDAY, RangeUnit


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path):
        with patch("daybook.config.CONFIG_FILE", tmp_path / "missing.conf"):
            config = load_config()
        assert config == Config()
        assert config.week_start == SUNDAY
        assert config.default_range is RangeUnit.DAY
        assert config.default_active_hour == 7

    def test_parses_values(self, tmp_path):
        config_file = tmp_path / "daybook.conf"
        config_file.write_text(
            "# daybook settings\n"
            'NOTES_API_URL="http://notes.local" # backend\n'
            "TIMEZONE=America/Toronto\n"
            "WEEK_START=Monday\n"
            "DEFAULT_RANGE=fortnight\n"
            "DEFAULT_ACTIVE_HOUR=8\n"
            "REFRESH_SECONDS=30  # twice a minute\n"
            "LABEL_FORMAT='%H.%M'\n"
        )

        with patch("daybook.config.CONFIG_FILE", config_file):
            config = load_config()

        assert config.notes_api_url == "http://notes.local"
        assert config.timezone == "America/Toronto"
        assert config.week_start == MONDAY
        assert config.default_range is RangeUnit.FORTNIGHT
        assert config.default_active_hour == 8
        assert config.refresh_seconds == 30
        assert config.label_format == "%H.%M"

    def test_invalid_values_keep_defaults(self, tmp_path, caplog):
        config_file = tmp_path / "daybook.conf"
        config_file.write_text("WEEK_START=Funday\nDEFAULT_RANGE=Decade\nDEFAULT_ACTIVE_HOUR=31\n")

        with patch("daybook.config.CONFIG_FILE", config_file), caplog.at_level(logging.WARNING):
            config = load_config()

        assert config.week_start == SUNDAY
        assert config.default_range is RangeUnit.DAY
        assert config.default_active_hour == 7
        assert "WEEK_START" in caplog.text
        assert "DEFAULT_RANGE" in caplog.text


class TestNotesPath:
    def test_default_under_data_dir(self):
        assert Config().notes_path == DATA_DIR / "notes.json"

    def test_expands_user(self):
        assert "~" not in str(Config(notes_file="~/notes.json").notes_path)
