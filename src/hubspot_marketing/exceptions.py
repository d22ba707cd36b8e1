"""
Exception classes raised by the HubSpot Marketing client.
Services never wrap these; callers inspect them directly.
"""

from typing import Optional


class HubSpotException(Exception):
    """Base exception for all client errors"""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.details = details or {}


class HubSpotAPIException(HubSpotException):
    """Raised when HubSpot answers with a non-2xx status"""

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str = "",
        details: dict = None,
    ):
        super().__init__(message, details=details)
        self.status_code = status_code
        self.body = body

    @property
    def category(self) -> Optional[str]:
        """HubSpot error category (e.g. OBJECT_NOT_FOUND), if reported"""
        return self.details.get("category")


class HubSpotNotFoundException(HubSpotAPIException):
    """Raised when the requested resource does not exist (404)"""

    pass


class HubSpotDecodeException(HubSpotException):
    """Raised when a response body cannot be decoded into the expected model"""

    pass
