import httpx
import pytest

from testsuites.api_testing.framework.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def _fresh_config():
    ConfigManager.reset()
    yield
    ConfigManager.reset()


@pytest.fixture
def recorded_requests():
    return []


@pytest.fixture
def mock_transport(recorded_requests):
    """Transport that records every request and answers with a JSON echo."""

    def handler(request: httpx.Request) -> httpx.Response:
        recorded_requests.append(request)
        return httpx.Response(200, json={"path": request.url.path})

    return httpx.MockTransport(handler)
