"""Tests for the config module."""

import json
import logging

import pytest

from soundalike import config


@pytest.fixture
def fresh_config(monkeypatch):
    """Reload configuration from a chosen path, restoring it afterwards."""

    def _use(path):
        monkeypatch.setattr(config, "_find_config", lambda: path)
        config.reset()

    yield _use
    config.reset()


class TestLoad:
    """Tests for config loading."""

    def test_project_config(self):
        """Test the shipped config.json matches the fallbacks."""
        config.reset()
        assert config.load()["defaults"] == config.FALLBACK_DEFAULTS

    def test_fallback_without_file(self, fresh_config):
        """Test fallback defaults when no config.json exists."""
        fresh_config(None)
        assert config.default_transcriber() == "phonemizer"
        assert config.default_max_distance() == 0
        assert config.default_max_length() is None

    def test_fallback_on_invalid_json(self, fresh_config, tmp_path):
        """Test fallback defaults when config.json is broken."""
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        fresh_config(path)
        assert config.load() == {"defaults": config.FALLBACK_DEFAULTS}

    def test_custom_values(self, fresh_config, tmp_path):
        """Test values are read from config.json."""
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps({"defaults": {"max_distance": 2, "normalize": True}}),
            encoding="utf-8",
        )
        fresh_config(path)
        assert config.default_max_distance() == 2
        assert config.default_normalize() is True
        # Missing keys fall back
        assert config.default_min_length() == 0
        assert config.default_detection_min_probability() == 0.9

    def test_non_object_json(self, fresh_config, tmp_path):
        """Test a config.json that is not an object is ignored."""
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")
        fresh_config(path)
        assert config.load() == {"defaults": config.FALLBACK_DEFAULTS}

    def test_env_path(self, monkeypatch, tmp_path):
        """Test $SOUNDALIKE_CONFIG takes precedence."""
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"defaults": {"transcriber": "espeak"}}), encoding="utf-8")
        monkeypatch.setenv(config.CONFIG_ENV, str(path))
        config.reset()
        try:
            assert config.default_transcriber() == "espeak"
        finally:
            monkeypatch.delenv(config.CONFIG_ENV)
            config.reset()

    def test_cached(self, fresh_config, tmp_path):
        """Test the file is read once until reset."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"defaults": {"min_length": 3}}), encoding="utf-8")
        fresh_config(path)
        assert config.default_min_length() == 3
        path.write_text(json.dumps({"defaults": {"min_length": 5}}), encoding="utf-8")
        assert config.default_min_length() == 3
        config.reset()
        assert config.default_min_length() == 5


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_levels(self):
        """Test verbose switches between info and warning."""
        logger = logging.getLogger("soundalike")
        config.configure_logging(verbose=True)
        assert logger.level == logging.INFO
        config.configure_logging(verbose=False)
        assert logger.level == logging.WARNING

    def test_single_handler(self):
        """Test repeated calls do not stack handlers."""
        config.configure_logging()
        config.configure_logging()
        assert len(logging.getLogger("soundalike").handlers) == 1
