"""
Client for the HubSpot Marketing API: forms, form submissions,
marketing emails and transactional email.
"""

from .client import HubSpotClient, get_hubspot_client
from .config import ClientConfig
from .exceptions import (
    HubSpotAPIException,
    HubSpotDecodeException,
    HubSpotException,
    HubSpotNotFoundException,
)
from .marketing import Marketing
from .paths import resource_path

__version__ = "0.1.0"

__all__ = [
    "HubSpotClient",
    "get_hubspot_client",
    "ClientConfig",
    "HubSpotException",
    "HubSpotAPIException",
    "HubSpotNotFoundException",
    "HubSpotDecodeException",
    "Marketing",
    "resource_path",
]
