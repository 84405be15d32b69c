import httpx
import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.main import app
from app.routers.roast import build_http_client, get_http_client

UPSTREAM_URL = "https://roast-worker.test/"


class FakeUpstream:
    """Stands in for the roast worker; records every request it receives."""

    def __init__(self):
        self.requests = []
        self.response = httpx.Response(200, json={"roast": "default roast"})
        self.error = None
        self.redirect_path = None

    def reply(self, status_code, text):
        self.response = httpx.Response(status_code, text=text)

    def fail(self, exc):
        self.error = exc

    def redirect_to(self, path):
        self.redirect_path = path

    def handler(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.redirect_path and request.url.path != self.redirect_path:
            return httpx.Response(302, headers={"Location": self.redirect_path})
        return self.response


@pytest.fixture
def settings():
    return Settings(_env_file=None, cloudflare_uri=UPSTREAM_URL, cloudflare_api="test-token")


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def client(settings, upstream):
    async def fake_http_client():
        async with build_http_client(settings, transport=httpx.MockTransport(upstream.handler)) as c:
            yield c

    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_http_client] = fake_http_client
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def image():
    return {"image": ("face.png", b"\x89PNG\r\n\x1a\nfake", "image/png")}
