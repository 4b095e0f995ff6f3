import os
import sys

import pytest

# Ensure tests can import the top-level scanner modules when pytest changes CWD.
REPO_ROOT = os.path.dirname(os.path.dirname(__file__))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from error_reporter import ErrorReporter  # noqa: E402


@pytest.fixture
def reporter():
    """A recording reporter that prints nothing."""
    return ErrorReporter()
