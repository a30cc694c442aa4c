"""
Tests for configuration loading.
"""

import os

import pytest

from hashnotes.config import Config, default_config

HASHNOTES_ENV_VARS = [
    "HASHNOTES_STORAGE_BACKEND",
    "HASHNOTES_DATA_DIR",
    "HASHNOTES_SEARCH_LIMIT",
    "HASHNOTES_SEARCH_TITLE_WEIGHT",
    "HASHNOTES_SEED_ON_EMPTY",
    "HASHNOTES_DUPLICATE_SUFFIX",
    "HASHNOTES_LOG_LEVEL",
    "HASHNOTES_LOG_TO_FILE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the caller's environment and any local .env file."""
    for name in HASHNOTES_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.mark.unit
class TestConfigDefaults:
    """Tests for default values."""

    def test_defaults(self):
        config = Config()

        assert config.storage.backend == "file"
        assert config.search.hashtag_weight == 10.0
        assert config.search.title_weight == 8.0
        assert config.search.content_weight == 2.0
        assert config.search.limit is None
        assert config.notes.seed_on_empty is True
        assert config.notes.duplicate_suffix == " (Copy)"
        assert config.logging.log_to_file is False

    def test_default_instance(self):
        assert default_config == Config()


@pytest.mark.unit
class TestConfigFromEnv:
    """Tests for environment loading."""

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("HASHNOTES_STORAGE_BACKEND", "memory")
        monkeypatch.setenv("HASHNOTES_SEARCH_LIMIT", "5")
        monkeypatch.setenv("HASHNOTES_SEARCH_TITLE_WEIGHT", "9.5")
        monkeypatch.setenv("HASHNOTES_SEED_ON_EMPTY", "false")
        monkeypatch.setenv("HASHNOTES_LOG_LEVEL", "DEBUG")

        config = Config.from_env()

        assert config.storage.backend == "memory"
        assert config.search.limit == 5
        assert config.search.title_weight == 9.5
        assert config.notes.seed_on_empty is False
        assert config.logging.level == "DEBUG"

    def test_empty_values_use_defaults(self, monkeypatch):
        monkeypatch.setenv("HASHNOTES_DATA_DIR", "")

        assert Config.from_env().storage.data_dir == "data"

    def test_env_file(self, tmp_path):
        env_file = tmp_path / "custom.env"
        env_file.write_text("HASHNOTES_DUPLICATE_SUFFIX=copy\n")

        try:
            config = Config.from_env(env_file=env_file)
        finally:
            # load_dotenv writes straight to os.environ
            os.environ.pop("HASHNOTES_DUPLICATE_SUFFIX", None)

        assert config.notes.duplicate_suffix == "copy"


@pytest.mark.unit
class TestConfigFromYaml:
    """Tests for YAML loading."""

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "storage:\n"
            "  backend: memory\n"
            "search:\n"
            "  limit: 20\n"
            "notes:\n"
            "  seed_on_empty: false\n"
        )

        config = Config.from_yaml(path)

        assert config.storage.backend == "memory"
        assert config.search.limit == 20
        assert config.search.hashtag_weight == 10.0
        assert config.notes.seed_on_empty is False

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert Config.from_yaml(path) == Config()

    def test_missing_yaml(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config.from_yaml(tmp_path / "missing.yaml")

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text("storage:\n  backend: file\n  data_dir: notes\nsearch:\n  limit: 3\n")
        monkeypatch.setenv("HASHNOTES_STORAGE_BACKEND", "memory")

        config = Config.from_env_or_yaml(yaml_path=path)

        assert config.storage.backend == "memory"
        assert config.search.limit == 3

    def test_yaml_only(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("notes:\n  duplicate_suffix: ' - copy'\n")

        assert Config.from_env_or_yaml(yaml_path=path).notes.duplicate_suffix == " - copy"
