"""Shared pytest configuration for i4n tests.

The application root (``app/``) is put on sys.path by the ``pythonpath``
setting in pyproject.toml, so ``i4n`` and ``tests.factories`` import
without installing the package.
"""

import pytest

from i4n.configuration import settings


@pytest.fixture
def fast_polling(monkeypatch):
    """Make await_ready() poll every millisecond by default."""
    monkeypatch.setattr(settings.loader, "ready_poll_interval_ms", 1)
    return settings.loader.ready_poll_interval_ms
