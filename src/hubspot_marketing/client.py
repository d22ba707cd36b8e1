"""
HubSpot HTTP transport.

A thin wrapper over ``requests.Session`` exposing one method per HTTP verb.
Request bodies are models (or plain dicts) serialized to JSON; responses are
decoded into the model class passed as ``out``. Non-2xx responses raise
``HubSpotAPIException``; network errors from requests propagate unchanged.
"""

import logging
from typing import Any, Dict, Optional, Type, TypeVar, Union

import requests
from pydantic import BaseModel, ValidationError

from .config import ClientConfig
from .exceptions import (
    HubSpotAPIException,
    HubSpotDecodeException,
    HubSpotNotFoundException,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

Body = Union[BaseModel, Dict[str, Any], None]


class HubSpotClient:
    """
    Authenticated HubSpot API client.

    Safe to share between threads for concurrent calls: the only state is
    the immutable config and the session. Use ``with_base_url`` to talk to
    another HubSpot host without touching the shared instance.
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            access_token: Bearer token. Ignored when ``config`` is given;
                          otherwise falls back to HUBSPOT_ACCESS_TOKEN.
            config: Full transport configuration.
            session: Existing session to reuse. Auth and JSON headers are
                     applied to it.

        Raises:
            ValueError: If no access token is available
        """
        self.config = config or ClientConfig.from_env(access_token)
        self._marketing = None

        if session is None:
            session = requests.Session()
        self.session = session
        self.session.headers.update(
            {
                "Authorization": f"Bearer {self.config.access_token}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
        )

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def api_version(self) -> str:
        return self.config.api_version

    @property
    def marketing(self):
        """Lazy initialization of the Marketing service registry"""
        if self._marketing is None:
            from .marketing import Marketing

            self._marketing = Marketing(self)
        return self._marketing

    def with_base_url(self, base_url: str) -> "HubSpotClient":
        """
        Return a client for another host sharing this client's session.

        Credentials, headers and timeout carry over. This client is left
        untouched, so concurrent callers of it are unaffected.
        """
        return HubSpotClient(
            config=self.config.model_copy(update={"base_url": base_url.rstrip("/")}),
            session=self.session,
        )

    # ------------------------------------------------------------------
    # Verbs
    # ------------------------------------------------------------------

    def get(
        self,
        path: str,
        out: Optional[Type[ModelT]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Optional[ModelT]:
        return self._request("GET", path, out=out, params=params)

    def post(
        self, path: str, body: Body = None, out: Optional[Type[ModelT]] = None
    ) -> Optional[ModelT]:
        return self._request("POST", path, body=body, out=out)

    def put(
        self, path: str, body: Body = None, out: Optional[Type[ModelT]] = None
    ) -> Optional[ModelT]:
        return self._request("PUT", path, body=body, out=out)

    def patch(
        self,
        path: str,
        body: Body = None,
        out: Optional[Type[ModelT]] = None,
        partial: bool = True,
    ) -> Optional[ModelT]:
        """PATCH a body; model bodies send only the fields the caller set."""
        return self._request("PATCH", path, body=body, out=out, partial=partial)

    def delete(
        self, path: str, out: Optional[Type[ModelT]] = None
    ) -> Optional[ModelT]:
        return self._request("DELETE", path, out=out)

    def close(self):
        """Close the HTTP session."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def url_for(self, path: str) -> str:
        """Join a resource path onto the configured host."""
        return f"{self.config.base_url}/{path.lstrip('/')}"

    def _request(
        self,
        method: str,
        path: str,
        body: Body = None,
        out: Optional[Type[ModelT]] = None,
        params: Optional[Dict[str, Any]] = None,
        partial: bool = False,
    ) -> Optional[ModelT]:
        url = self.url_for(path)
        payload = _serialize(body, partial)

        logger.debug("%s %s params=%s", method, url, params)
        response = self.session.request(
            method,
            url,
            json=payload,
            params=params,
            timeout=self.config.timeout,
        )

        if not response.ok:
            raise _api_error(method, url, response)

        if out is None:
            return None
        return _decode(response, out)


def _serialize(body: Body, partial: bool = False) -> Optional[Dict[str, Any]]:
    if body is None:
        return None
    if isinstance(body, BaseModel):
        if hasattr(body, "to_payload"):
            return body.to_payload(partial=partial)
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    return body


def _decode(response: requests.Response, out: Type[ModelT]) -> ModelT:
    try:
        data = response.json()
    except ValueError as e:
        raise HubSpotDecodeException(
            f"Response from {response.url} is not valid JSON",
            details={"status_code": response.status_code, "body": response.text[:500]},
        ) from e

    try:
        return out.model_validate(data)
    except ValidationError as e:
        raise HubSpotDecodeException(
            f"Response from {response.url} does not match {out.__name__}",
            details={"errors": e.errors(include_url=False)},
        ) from e


def _api_error(method: str, url: str, response: requests.Response) -> HubSpotAPIException:
    """Build the exception for a non-2xx response."""
    body = response.text
    try:
        details = response.json()
        if not isinstance(details, dict):
            details = {"response": details}
    except ValueError:
        details = {}

    message = details.get("message") or response.reason or "HubSpot API error"
    logger.warning(
        "HubSpot %s %s failed with %s: %s", method, url, response.status_code, message
    )

    exc_class = HubSpotNotFoundException if response.status_code == 404 else HubSpotAPIException
    return exc_class(
        f"{response.status_code} {message}",
        status_code=response.status_code,
        body=body,
        details=details,
    )


def get_hubspot_client() -> HubSpotClient:
    """
    Factory function to create a HubSpot client.
    Reads configuration from environment variables.

    Returns:
        HubSpotClient instance
    """
    return HubSpotClient()
