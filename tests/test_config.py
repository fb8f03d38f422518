# ABOUTME: Tests for environment driven configuration
# ABOUTME: Verifies env prefix handling and conversion into run options

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from kontent_normalizer.config import Config, get_config, reload_config


class TestConfig:
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config(_env_file=None)

        assert config.project_id == ""
        assert config.language_codenames == ["default"]
        assert config.include_kontent_metadata is False
        assert config.project_environment == "master"
        assert config.log_level == "INFO"

    def test_reads_prefixed_environment(self):
        env = {
            "KONTENT_NORMALIZER_PROJECT_ID": "abc",
            "KONTENT_NORMALIZER_LANGUAGE_CODENAMES": '["en-US", "cs-CZ"]',
            "KONTENT_NORMALIZER_INCLUDE_KONTENT_METADATA": "true",
            "KONTENT_NORMALIZER_PROJECT_ENVIRONMENT": "preview",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config(_env_file=None)

        assert config.project_id == "abc"
        assert config.language_codenames == ["en-US", "cs-CZ"]
        assert config.include_kontent_metadata is True
        assert config.project_environment == "preview"

    def test_to_options(self):
        config = Config(_env_file=None, project_id="abc", language_codenames=["en-US"])

        options = config.to_options()

        assert options.project_id == "abc"
        assert options.language_codenames == ["en-US"]
        assert options.project_environment == "master"

    def test_to_options_overrides_ignore_none(self):
        config = Config(_env_file=None, project_id="abc", language_codenames=["en-US"])

        options = config.to_options(project_id="xyz", language_codenames=None, project_environment="preview")

        assert options.project_id == "xyz"
        assert options.language_codenames == ["en-US"]
        assert options.project_environment == "preview"

    def test_to_options_rejects_empty_languages(self):
        config = Config(_env_file=None, language_codenames=[])

        with pytest.raises(ValidationError):
            config.to_options()


class TestGlobalConfig:
    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_reload_config_replaces_instance(self):
        first = get_config()

        with patch.dict(os.environ, {"KONTENT_NORMALIZER_PROJECT_ID": "reloaded"}):
            second = reload_config()

        assert second is not first
        assert second.project_id == "reloaded"
        assert get_config() is second
        reload_config()
