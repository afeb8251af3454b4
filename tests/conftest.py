import asyncio

import pytest
from starlette.testclient import TestClient

import statica


@pytest.fixture
def site_dir(tmp_path):
    root = tmp_path / "site"
    root.mkdir()
    (root / "index.html").write_text("index file content", encoding="utf-8")
    (root / "style.css").write_text("body{}", encoding="utf-8")
    (root / "app.js").write_text('console.log("app")', encoding="utf-8")
    yield root


@pytest.fixture
def provider(site_dir):
    return statica.FileSystemProvider(site_dir)


@pytest.fixture
def client_for(provider):
    """Wraps a ``handler(req, res)`` coroutine in a test client."""

    def make_client(handler, **options):
        options.setdefault("provider", provider)
        return TestClient(statica.Endpoint(handler, **options))

    return make_client


@pytest.fixture
def messages():
    return []


@pytest.fixture
def sink(messages):
    async def send(message):
        messages.append(message)

    return statica.ResponseSink(send)


@pytest.fixture
def run():
    """Runs a coroutine to completion."""
    return asyncio.run
