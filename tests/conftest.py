import pytest

from zetaquad.config import reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Every test starts from default settings, whatever the shell exports."""
    for var in ("ZETAQUAD_TOLERANCE", "ZETAQUAD_MAX_LEVEL", "ZETAQUAD_PATCH_NONFINITE"):
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    yield
    reset_settings()
