"""Pytest configuration for LUIS client tests."""

import json
import os

import pytest
import requests
from dotenv import load_dotenv

from luis_client import create

# Load environment variables from .env file
load_dotenv()

# Live service credentials, only needed for integration tests
LUIS_APP_ID = os.getenv("LUIS_APP_ID")
LUIS_SUBSCRIPTION_KEY = os.getenv("LUIS_SUBSCRIPTION_KEY")


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring the live LUIS service"
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests if not requested."""
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="Integration tests require --integration flag")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration", "-I",
        action="store_true",
        default=False,
        help="Run integration tests that require the live LUIS service"
    )
    parser.addoption(
        "--app-id",
        action="store",
        default=None,
        help="LUIS application ID (default: $LUIS_APP_ID)"
    )
    parser.addoption(
        "--subscription-key",
        action="store",
        default=None,
        help="LUIS subscription key (default: $LUIS_SUBSCRIPTION_KEY)"
    )


def _make_response(body, status_code: int = 200, url: str = "") -> requests.Response:
    """Build a requests Response carrying the given body."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    response._content = body.encode("utf-8")
    return response


@pytest.fixture
def v1_body():
    """Sample v1 response body."""
    return {
        "query": "book a flight to Paris",
        "intents": [{"intent": "BookFlight", "score": 0.91}],
        "entities": [
            {"entity": "Paris", "type": "Location", "startIndex": 21, "endIndex": 25, "score": 0.88}
        ],
    }


@pytest.fixture
def v1_preview_body():
    """Sample v1 preview response body."""
    return {
        "query": "book a flight to Paris",
        "topScoringIntent": {"intent": "BookFlight", "score": 0.91},
        "entities": [],
    }


@pytest.fixture
def live_application(request):
    """Create an application against the live service."""
    app_id = request.config.getoption("--app-id") or LUIS_APP_ID
    subscription_key = request.config.getoption("--subscription-key") or LUIS_SUBSCRIPTION_KEY
    if not app_id or not subscription_key:
        pytest.skip("LUIS credentials not configured")
    return create(app_id, subscription_key)


@pytest.fixture
def make_response():
    """Factory for canned HTTP responses."""
    return _make_response
