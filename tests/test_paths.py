"""
Tests for resource path construction.
"""

from hubspot_marketing.paths import (
    MARKETING_BASE_PATH,
    FORMS_RESOURCE,
    TRANSACTIONAL_RESOURCE,
    resource_path,
    item_path,
)


def test_resource_path_format():
    assert resource_path("marketing", "v3", "forms") == "marketing/v3/forms"


def test_resource_path_is_deterministic():
    first = resource_path(MARKETING_BASE_PATH, "v3", TRANSACTIONAL_RESOURCE)
    second = resource_path(MARKETING_BASE_PATH, "v3", TRANSACTIONAL_RESOURCE)
    assert first == second == "marketing/v3/transactional"


def test_resource_path_uses_given_version():
    assert resource_path(MARKETING_BASE_PATH, "v4", FORMS_RESOURCE) == "marketing/v4/forms"


def test_item_path():
    assert item_path("marketing/v3/forms", "abc123") == "marketing/v3/forms/abc123"
