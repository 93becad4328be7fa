import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

load_dotenv(ROOT / ".env")


@pytest.fixture(autouse=True)
def translate_sandbox(monkeypatch):
    monkeypatch.setenv("TRANSLATE_SANDBOX", "1")
    monkeypatch.delenv("GOOGLE_TRANSLATE_API_KEY", raising=False)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from api.app.main import app

    return TestClient(app)
