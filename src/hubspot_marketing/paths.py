"""
Resource path construction for versioned HubSpot endpoints.
"""

MARKETING_BASE_PATH = "marketing"

FORMS_RESOURCE = "forms"
EMAILS_RESOURCE = "emails"
TRANSACTIONAL_RESOURCE = "transactional"


def resource_path(base_path: str, api_version: str, resource: str) -> str:
    """Return ``{base}/{version}/{resource}``, e.g. ``marketing/v3/forms``."""
    return f"{base_path}/{api_version}/{resource}"


def item_path(collection_path: str, item_id: str) -> str:
    """Return the path of a single item inside a collection."""
    return f"{collection_path}/{item_id}"
