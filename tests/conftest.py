import pytest


@pytest.fixture(autouse=True)
def _concise_logging(monkeypatch):
    """Keep the structured logger in concise mode unless a test opts in."""
    monkeypatch.delenv("DEBUG", raising=False)
    yield
