import pytest

from pastdate.parsing.cursor import ParseContext
from tests.factories import make_context


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep tests away from the real data dir and any local overrides."""
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("IGNORE_CASE", raising=False)
    monkeypatch.delenv("TRACE_PARSER", raising=False)


@pytest.fixture
def ctx() -> ParseContext:
    """Parse context pinned to FIXED_NOW with default options."""
    return make_context()
