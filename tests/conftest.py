"""Root-level pytest fixtures for the chooser test suite.

Provides a shared two-variant chooser and a capturing logger so tests
can assert on the error line emitted by ``Chooser.choose``.
"""

import pytest
from unittest.mock import MagicMock

from chooser import Chooser


# =============================================================================
# Chooser Fixtures
# =============================================================================

@pytest.fixture
def codec_chooser():
    """Chooser over the two codecs used throughout the tests: line, json."""
    return Chooser(["line", "json"])


@pytest.fixture
def line_choice(codec_chooser):
    """Choice bound to "line"."""
    return codec_chooser.choose("line")


@pytest.fixture
def capturing_logger():
    """Injected logger stand-in that records calls instead of emitting.

    Examples
    --------
    >>> def test_logs(capturing_logger):
    ...     Chooser(["a"], logger=capturing_logger)
    ...     capturing_logger.error.assert_not_called()
    """
    return MagicMock()


@pytest.fixture
def make_chooser(capturing_logger):
    """Factory fixture for choosers wired to the capturing logger."""
    def _make(choices):
        return Chooser(choices, logger=capturing_logger)

    return _make
