"""Tests for configuration loading."""

import logging
from pathlib import Path

from recurtask.config import Config, load_config


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "recurtask.conf")
        assert config.holiday_file == "holiday.toml"
        assert config.task_file == "task.toml"
        assert config.home == tmp_path

    def test_reads_keys(self, tmp_path):
        conf = tmp_path / "recurtask.conf"
        conf.write_text(
            "# paths\n"
            "HOLIDAY_FILE = \"data/holiday.toml\"  # quoted with comment\n"
            "task_file = tasks/monthly.toml # inline comment\n"
        )
        config = load_config(conf)
        assert config.holiday_file == "data/holiday.toml"
        assert config.task_file == "tasks/monthly.toml"

    def test_single_quotes(self, tmp_path):
        conf = tmp_path / "recurtask.conf"
        conf.write_text("task_file = 'my tasks.toml'\n")
        assert load_config(conf).task_file == "my tasks.toml"

    def test_ignores_unknown_and_malformed_lines(self, tmp_path, caplog):
        conf = tmp_path / "recurtask.conf"
        conf.write_text("timezone = Asia/Tokyo\nnot a setting\n")
        with caplog.at_level(logging.WARNING):
            config = load_config(conf)
        assert config == Config(home=tmp_path)
        assert "not a setting" in caplog.text


class TestConfigPaths:
    def test_relative_paths_resolve_against_home(self, tmp_path):
        config = Config(home=tmp_path)
        assert config.holiday_path == tmp_path / "holiday.toml"
        assert config.task_path == tmp_path / "task.toml"

    def test_absolute_paths_kept(self, tmp_path):
        target = tmp_path / "elsewhere" / "task.toml"
        config = Config(task_file=str(target), home=Path("/unused"))
        assert config.task_path == target

    def test_expands_user_path(self):
        config = Config(holiday_file="~/cal/holiday.toml", home=Path("/unused"))
        assert "~" not in str(config.holiday_path)
        assert config.holiday_path == Path.home() / "cal" / "holiday.toml"
