"""
Marketing email service (read access).
"""

import logging
from typing import Optional

from ..paths import EMAILS_RESOURCE, MARKETING_BASE_PATH, item_path, resource_path
from ..schemas import ListOptions, MarketingEmail, MarketingEmailResponse

logger = logging.getLogger(__name__)


class MarketingEmailService:
    """Client for ``marketing/{version}/emails``."""

    def __init__(self, client):
        self.client = client
        self.email_path = resource_path(MARKETING_BASE_PATH, client.api_version, EMAILS_RESOURCE)

    def get(self, email_id: str) -> MarketingEmail:
        """Fetch a marketing email by id."""
        return self.client.get(item_path(self.email_path, email_id), MarketingEmail)

    def list(self, options: Optional[ListOptions] = None) -> MarketingEmailResponse:
        """Fetch one page of marketing emails."""
        params = options.to_params() if options else None
        response = self.client.get(self.email_path, MarketingEmailResponse, params=params)
        logger.debug("Retrieved %d marketing emails", len(response.results))
        return response
