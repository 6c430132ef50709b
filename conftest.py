# Ensure project root is on sys.path for tests
import sys, pathlib, time
import pytest
root = pathlib.Path(__file__).resolve().parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from typewriter.core.logging import logger

@pytest.fixture
def sleeps(monkeypatch):
    """Record every time.sleep call instead of blocking."""
    calls = []
    monkeypatch.setattr(time, "sleep", calls.append)
    return calls

@pytest.fixture(autouse=True)
def _restore_log_level():
    threshold = logger.threshold
    yield
    logger.threshold = threshold
