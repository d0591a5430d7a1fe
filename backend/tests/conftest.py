import httpx
import pytest

from wsb_prices.main import create_app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def static_dir(tmp_path):
    (tmp_path / "index.html").write_text("<html><body>wsb frontend</body></html>")
    (tmp_path / "style.css").write_text("body { margin: 0; }")
    return tmp_path


@pytest.fixture
def app(static_dir):
    return create_app(static_dir=str(static_dir))


@pytest.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
