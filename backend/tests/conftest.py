"""pytest fixtures for the origin server."""
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from origin_server.core.config import Settings
from origin_server.main import create_app


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Content root with a text file, a JSON file and a directory index."""
    root = tmp_path / "content"
    (root / "docs").mkdir(parents=True)
    (root / "hello.txt").write_text("hello from disk\n")
    (root / "data.json").write_text('{"static": true}')
    (root / "docs" / "index.html").write_text("<h1>docs</h1>")
    return root


@pytest.fixture
def settings(content_dir: Path) -> Settings:
    return Settings(CONTENT_DIR=str(content_dir))


@pytest.fixture
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
