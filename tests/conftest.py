"""
Pytest fixtures for Release Notes Viewer tests.

Provides:
- Sample changelog documents
- Test configuration
- A release store preloaded from the sample changelog
- Flask test client
"""

import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


SAMPLE_CHANGELOG = """# Changelog

Intro prose that is not part of any release.
- stray bullet before any version

## 1.2.0

- Added `--json` flag to the [CLI docs](https://example.com/docs)
- Fixed crash when config is missing
- Improved startup time
- Removed legacy `sync` command
- Polished wording in help output

## 1.1.0-beta (2025-01-15)

### Highlights
- Support for custom themes
* asterisk bullets are ignored
-

## 1.0.0
- Initial release
"""


@pytest.fixture
def sample_changelog():
    """Provide a small changelog exercising headers, bullets and noise lines."""
    return SAMPLE_CHANGELOG


@pytest.fixture
def test_config():
    """Provide a test configuration dict."""
    return {
        'source': {
            'url': 'https://example.com/CHANGELOG.md',
            'timeout': 5,
        },
        'web': {
            'host': '127.0.0.1',
            'port': 8080,
        },
        '_config_path': None,
    }


@pytest.fixture
def changelog_file(tmp_path, sample_changelog):
    """Provide the sample changelog written to a temporary file."""
    path = tmp_path / 'CHANGELOG.md'
    path.write_text(sample_changelog, encoding='utf-8')
    return str(path)


@pytest.fixture
def store(test_config, sample_changelog):
    """Provide a release store loaded from the sample changelog."""
    from relnotes.core.store import ReleaseStore

    store = ReleaseStore(test_config)
    store.load_text(sample_changelog, source='test')
    return store


@pytest.fixture
def empty_store(test_config):
    """Provide a release store that has not loaded anything."""
    from relnotes.core.store import ReleaseStore

    return ReleaseStore(test_config)


@pytest.fixture
def flask_app(store, test_config):
    """Provide a Flask test application."""
    from relnotes.api.app import create_app

    app = create_app(test_config, store)
    app.config['TESTING'] = True

    return app


@pytest.fixture
def client(flask_app):
    """Provide a Flask test client."""
    return flask_app.test_client()
