import pytest
from fastapi.testclient import TestClient

from livepreview.api.main import create_app
from livepreview.core.state import ActiveRootStore


@pytest.fixture
def site(tmp_path):
    """A small project folder plus a secret file sitting next to it."""
    root = tmp_path / "site"
    root.mkdir()
    (root / "index.html").write_text("<h1>home</h1>")
    (root / "index.htm").write_text("<h1>old home</h1>")
    (root / "app.js").write_text("console.log('hi');")
    (root / ".env").write_text("SECRET=1")
    (root / ".git").mkdir()
    (root / ".git" / "config").write_text("[core]")
    (root / "docs").mkdir()
    (root / "docs" / "index.htm").write_text("docs page")
    (root / "empty").mkdir()
    (tmp_path / "outside.txt").write_text("outside the root")
    return root


@pytest.fixture
def store():
    return ActiveRootStore()


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as c:
        yield c
