"""
Marketing email and transactional email models.
"""

from typing import Any, Dict, Optional

from pydantic import Field

from .base import HubSpotModel, PagedResponse


class MarketingEmail(HubSpotModel):
    id: Optional[str] = None
    name: str = ""
    subject: Optional[str] = None
    state: Optional[str] = None
    type: Optional[str] = None
    archived: Optional[bool] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    publish_date: Optional[str] = None


class MarketingEmailResponse(PagedResponse):
    results: list[MarketingEmail] = Field(default_factory=list)
    total: Optional[int] = None


class TransactionalMessage(HubSpotModel):
    to: str
    sender: Optional[str] = Field(default=None, alias="from")
    send_id: Optional[str] = None
    reply_to: Optional[list[str]] = None
    cc: Optional[list[str]] = None
    bcc: Optional[list[str]] = None


class SendSingleEmailRequest(HubSpotModel):
    """Body of a single transactional send."""

    email_id: int
    message: TransactionalMessage
    contact_properties: Optional[Dict[str, str]] = None
    custom_properties: Optional[Dict[str, Any]] = None


class EmailEventId(HubSpotModel):
    id: str = ""
    created: str = ""


class EmailSendStatus(HubSpotModel):
    """Status of an asynchronous send, as returned when the send is queued."""

    status_id: str = ""
    # PENDING, PROCESSING, CANCELED or COMPLETE
    status: str = ""
    send_result: Optional[str] = None
    requested_at: Optional[str] = None
    started_at: Optional[str] = None
    completed_at: Optional[str] = None
    event_id: Optional[EmailEventId] = None
