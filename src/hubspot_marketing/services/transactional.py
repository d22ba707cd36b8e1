"""
Transactional (single-send) email service.
"""

import logging

from ..paths import MARKETING_BASE_PATH, TRANSACTIONAL_RESOURCE, resource_path
from ..schemas import EmailSendStatus, SendSingleEmailRequest

logger = logging.getLogger(__name__)


class TransactionalService:
    """Client for ``marketing/{version}/transactional``."""

    def __init__(self, client):
        self.client = client
        self.transactional_path = resource_path(
            MARKETING_BASE_PATH, client.api_version, TRANSACTIONAL_RESOURCE
        )

    def send_single_email(self, request: SendSingleEmailRequest) -> EmailSendStatus:
        """
        Queue a single transactional email.

        Not idempotent: a failed call may or may not have queued the send,
        so it is never retried here.

        Returns:
            The send status; poll ``status_id`` for completion
        """
        path = f"{self.transactional_path}/single-email/send"
        logger.info("Sending transactional email %s", request.email_id)
        logger.debug("Transactional email %s recipient: %s", request.email_id, request.message.to)
        return self.client.post(path, request, EmailSendStatus)
