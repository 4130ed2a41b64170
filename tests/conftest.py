"""Test configuration for pytest."""

import logging
import pytest

from keystore.registry import IMPLEMENTATIONS


@pytest.fixture(autouse=True)
def configure_test_logging(monkeypatch):
    """Configure logging for tests to be minimal."""
    monkeypatch.setenv('KEYSTORE_LOG_LEVEL', 'WARNING')

    logging.getLogger().setLevel(logging.WARNING)

    for logger_name in ['keystore.cli', 'keystore.registry']:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


@pytest.fixture(scope="module", params=sorted(IMPLEMENTATIONS), ids=lambda name: name)
def keystore_cls(request):
    """Every registered implementation runs the same contract tests."""
    return IMPLEMENTATIONS[request.param]


@pytest.fixture
def keystore(keystore_cls):
    """A fresh, empty keystore of the implementation under test."""
    instance = keystore_cls()
    assert instance.size() == 0
    return instance
