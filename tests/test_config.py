"""Tests for configuration loading."""

from pathlib import Path

from tasktogo.config import DATA_DIR, Config, load_config


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "nope.conf")
        assert config == Config()

    def test_parses_values(self, tmp_path):
        path = tmp_path / "togo.conf"
        path.write_text(
            "# Tasks To Go settings\n"
            "\n"
            'DATA_DIR = "/srv/togo data" # quoted with comment\n'
            "LOG_LEVEL = debug\n"
        )

        config = load_config(path)

        assert config.data_dir == "/srv/togo data"
        assert config.log_level == "DEBUG"

    def test_strips_inline_comment_on_unquoted(self, tmp_path):
        path = tmp_path / "togo.conf"
        path.write_text("data_dir = /srv/togo # where tasks live\n")
        assert load_config(path).data_dir == "/srv/togo"

    def test_single_quotes(self, tmp_path):
        path = tmp_path / "togo.conf"
        path.write_text("data_dir = '/srv/togo'\n")
        assert load_config(path).data_dir == "/srv/togo"

    def test_ignores_unknown_keys_and_junk_lines(self, tmp_path):
        path = tmp_path / "togo.conf"
        path.write_text("COLOR = red\nthis line has no equals\n")
        assert load_config(path) == Config()

    def test_bad_log_level_is_ignored(self, tmp_path):
        path = tmp_path / "togo.conf"
        path.write_text("LOG_LEVEL = LOUD\n")
        assert load_config(path).log_level == "WARNING"


class TestResolvedDataDir:
    def test_default(self):
        assert Config().resolved_data_dir == DATA_DIR

    def test_expands_user_path(self):
        config = Config(data_dir="~/tasks")
        assert config.resolved_data_dir == Path.home() / "tasks"
