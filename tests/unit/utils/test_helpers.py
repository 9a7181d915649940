"""Unit tests for helper functions in helpers.py.

Test coverage includes:

1. require_environment() decorator behavior
   - 1.1. Ensures decorated functions execute when all env vars are present.
   - 1.2. Ensures missing or empty env vars raise a descriptive MissingEnvironmentVariableError.
"""

import pytest

from urlstore.utils.helpers import require_environment
from urlstore.exceptions import ConfigurationError, MissingEnvironmentVariableError


@require_environment('TEST_VAR_A', 'TEST_VAR_B')
def guarded(value):
    return value * 2


def test_require_environment_passes(monkeypatch):
    monkeypatch.setenv('TEST_VAR_A', 'a')
    monkeypatch.setenv('TEST_VAR_B', 'b')
    assert guarded(21) == 42


def test_require_environment_missing(monkeypatch):
    monkeypatch.setenv('TEST_VAR_A', '')
    monkeypatch.delenv('TEST_VAR_B', raising=False)

    with pytest.raises(MissingEnvironmentVariableError, match="Missing required environment variables: 'TEST_VAR_A', 'TEST_VAR_B'") as excinfo:
        guarded(21)

    assert isinstance(excinfo.value, ConfigurationError)
    assert excinfo.value.error_code == 'config:missing_environment_variable_error'


def test_require_environment_preserves_metadata():
    assert guarded.__name__ == 'guarded'
