# Ensure src/ is on sys.path for tests and start each test with no context table
import sys, pathlib
import pytest
root = pathlib.Path(__file__).resolve().parent
src = root / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

@pytest.fixture(autouse=True)
def fresh_context(monkeypatch):
    import behold.context
    monkeypatch.delenv("BEHOLD_CONTEXT", raising=False)
    monkeypatch.setattr(behold.context, "_store", None)

