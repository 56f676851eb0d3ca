"""Tests for config loading."""

from pathlib import Path

import pytest

from taskcycle.config import Config, ensure_dirs, load_config


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("TASKCYCLE_HOME", str(tmp_path))
    return tmp_path


def write_conf(home: Path, text: str) -> Path:
    path = home / "config" / "taskcycle.conf"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


class TestLoadConfig:
    def test_defaults_without_file(self, home):
        config = load_config()

        assert config.input_path == home / "inputs"
        assert config.output_path == home / "outputs"
        assert config.default_weeks == 4
        assert config.default_days_between == 7
        assert config.include_start_column is True

    def test_reads_values(self, home):
        write_conf(
            home,
            "# taskcycle settings\n"
            "INPUT_DIR = lists\n"
            'LIST_NAME = "Home # chores"  # label\n'
            "DEFAULT_WEEKS = 6 # six weeks\n"
            "DEFAULT_DAYS_BETWEEN = 0\n"
            "INCLUDE_START_COLUMN = no\n"
            "FILE_PREFIX = 'chores'\n"
            "UNKNOWN_KEY = 1\n"
            "not a setting\n",
        )

        config = load_config()

        assert config.input_path == home / "lists"
        assert config.list_name == "Home # chores"
        assert config.default_weeks == 6
        assert config.default_days_between == 0
        assert config.include_start_column is False
        assert config.file_prefix == "chores"

    def test_bad_integer_keeps_default(self, home, caplog):
        write_conf(home, "DEFAULT_OCCURRENCES = lots\n")

        config = load_config()

        assert config.default_occurrences == 4
        assert "DEFAULT_OCCURRENCES" in caplog.text

    def test_absolute_dirs(self, home, tmp_path):
        target = tmp_path / "elsewhere"
        write_conf(home, f"OUTPUT_DIR = {target}\n")
        assert load_config().output_path == target

    def test_explicit_path(self, home, tmp_path):
        path = tmp_path / "custom.conf"
        path.write_text("DEFAULT_DAYS_IN_ROW = 3\n")
        assert load_config(path).default_days_in_row == 3


class TestEnsureDirs:
    def test_creates_both(self, tmp_path):
        config = Config(home=tmp_path)
        ensure_dirs(config)
        assert (tmp_path / "inputs").is_dir()
        assert (tmp_path / "outputs").is_dir()
