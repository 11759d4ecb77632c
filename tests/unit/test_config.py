"""Unit tests for configuration module."""

import os
import tempfile

import pytest
import yaml

from relnotes.config import (
    load_config, validate_config, ConfigError, get_changelog_url, get_timeout,
    AppConfig, DEFAULT_CHANGELOG_URL,
)


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Keep the caller's environment out of config tests."""
    for name in ('RELNOTES_CHANGELOG_URL', 'RELNOTES_TIMEOUT', 'RELNOTES_PORT'):
        monkeypatch.delenv(name, raising=False)


def write_config(data) -> str:
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump(data, f)
        return f.name


class TestConfigLoading:
    """Tests for configuration loading."""

    def test_load_config_valid(self):
        """Test loading a valid config file."""
        temp_path = write_config({
            'source': {'url': 'https://example.com/CHANGES.md', 'timeout': 10},
            'web': {'port': 9000},
        })

        try:
            config = load_config(temp_path)

            assert config['source']['url'] == 'https://example.com/CHANGES.md'
            assert config['source']['timeout'] == 10
            assert config['web']['port'] == 9000
            assert config['_config_path'] == temp_path
        finally:
            os.unlink(temp_path)

    def test_load_config_file_not_found(self):
        """Test loading non-existent config file raises error."""
        with pytest.raises(ConfigError) as exc_info:
            load_config('/nonexistent/config.yaml')

        assert 'not found' in str(exc_info.value)

    def test_load_config_without_file(self):
        """Test that no path gives the defaults."""
        config = load_config(None)

        assert config['source']['url'] == DEFAULT_CHANGELOG_URL
        assert config['source']['timeout'] == 30
        assert config['web']['host'] == '127.0.0.1'
        assert config['web']['port'] == 8080
        assert config['_config_path'] is None

    def test_load_config_defaults(self):
        """Test that defaults fill in missing keys."""
        temp_path = write_config({'web': {'host': '0.0.0.0'}})

        try:
            config = load_config(temp_path)

            assert config['web']['host'] == '0.0.0.0'
            assert config['web']['port'] == 8080
            assert config['source']['url'] == DEFAULT_CHANGELOG_URL
        finally:
            os.unlink(temp_path)

    def test_load_empty_file(self):
        """Test an empty YAML file behaves like no settings."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
            temp_path = f.name

        try:
            config = load_config(temp_path)
            assert config['source']['url'] == DEFAULT_CHANGELOG_URL
        finally:
            os.unlink(temp_path)

    def test_load_non_mapping(self):
        """Test a YAML list is rejected."""
        temp_path = write_config(['a', 'b'])

        try:
            with pytest.raises(ConfigError):
                load_config(temp_path)
        finally:
            os.unlink(temp_path)

    def test_load_null_section(self):
        """Test an empty section falls back to defaults."""
        temp_path = write_config({'source': None, 'web': {'port': 9000}})

        try:
            config = load_config(temp_path)

            assert config['source']['url'] == DEFAULT_CHANGELOG_URL
            assert config['web']['port'] == 9000
        finally:
            os.unlink(temp_path)

    @pytest.mark.parametrize('data', [
        {'web': 5},
        {'source': 'https://example.com/CHANGELOG.md'},
        {'source': ['a']},
    ])
    def test_load_section_not_mapping(self, data):
        """Test a section that is not a mapping raises ConfigError."""
        temp_path = write_config(data)

        try:
            with pytest.raises(ConfigError) as exc_info:
                load_config(temp_path)

            assert 'must be a mapping' in str(exc_info.value)
        finally:
            os.unlink(temp_path)

    def test_load_config_env_override(self, monkeypatch):
        """Test that environment variables override config values."""
        temp_path = write_config({'source': {'url': 'https://from-file.example/CL.md'}})

        try:
            monkeypatch.setenv('RELNOTES_CHANGELOG_URL', 'https://from-env.example/CL.md')
            monkeypatch.setenv('RELNOTES_TIMEOUT', '12')
            monkeypatch.setenv('RELNOTES_PORT', '9999')

            config = load_config(temp_path)

            assert config['source']['url'] == 'https://from-env.example/CL.md'
            assert config['source']['timeout'] == 12.0
            assert config['web']['port'] == 9999
        finally:
            os.unlink(temp_path)

    def test_env_override_not_a_number(self, monkeypatch):
        """Test a malformed numeric override raises ConfigError."""
        monkeypatch.setenv('RELNOTES_PORT', 'eighty')

        with pytest.raises(ConfigError) as exc_info:
            load_config(None)

        assert 'RELNOTES_PORT' in str(exc_info.value)


class TestConfigValidation:
    """Tests for configuration validation."""

    def test_validate_valid_config(self, test_config):
        """Test validating a valid configuration."""
        # Should not raise
        validate_config(test_config)

    def test_validate_non_http_url(self, test_config):
        """Test validation fails for non-http URLs."""
        test_config['source']['url'] = 'ftp://example.com/CHANGELOG.md'

        with pytest.raises(ConfigError) as exc_info:
            validate_config(test_config)

        assert 'source.url' in str(exc_info.value)

    def test_validate_missing_url(self, test_config):
        """Test validation fails without a URL."""
        test_config['source']['url'] = ''

        with pytest.raises(ConfigError):
            validate_config(test_config)

    @pytest.mark.parametrize('timeout', [0, -1, 'soon', True])
    def test_validate_bad_timeout(self, test_config, timeout):
        """Test validation fails for non-positive or non-numeric timeouts."""
        test_config['source']['timeout'] = timeout

        with pytest.raises(ConfigError):
            validate_config(test_config)

    @pytest.mark.parametrize('port', [0, 8080.5, '8080'])
    def test_validate_bad_port(self, test_config, port):
        """Test validation fails for invalid ports."""
        test_config['web']['port'] = port

        with pytest.raises(ConfigError):
            validate_config(test_config)


class TestConfigHelpers:
    """Tests for configuration helper functions."""

    def test_get_changelog_url(self, test_config):
        """Test getting the changelog URL from config."""
        assert get_changelog_url(test_config) == 'https://example.com/CHANGELOG.md'

    def test_get_changelog_url_default(self):
        """Test getting the default changelog URL."""
        assert get_changelog_url({}) == DEFAULT_CHANGELOG_URL

    def test_get_timeout(self, test_config):
        """Test getting the fetch timeout."""
        assert get_timeout(test_config) == 5
        assert get_timeout({}) == 30

    def test_app_config_from_dict(self, test_config):
        """Test the dataclass view of a loaded config."""
        app_config = AppConfig.from_dict(test_config)

        assert app_config.source.timeout == 5
        assert app_config.web.port == 8080
        assert app_config.web.host == '127.0.0.1'
        assert app_config.source.url == 'https://example.com/CHANGELOG.md'

    def test_app_config_defaults(self):
        """Test missing sections fall back to defaults."""
        app_config = AppConfig.from_dict({})

        assert app_config.source.url == DEFAULT_CHANGELOG_URL
        assert app_config.web.port == 8080
