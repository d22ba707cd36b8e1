"""
Pytest configuration: adds src/ to the path so the package imports without installing.
"""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from hubspot_marketing.client import HubSpotClient  # noqa: E402
from hubspot_marketing.config import ClientConfig  # noqa: E402


@pytest.fixture
def access_token():
    return "test-access-token-12345"


@pytest.fixture
def hubspot_client(access_token):
    """A client pointed at the default API host."""
    return HubSpotClient(config=ClientConfig(access_token=access_token))
