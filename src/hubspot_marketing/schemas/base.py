"""
Shared base model for HubSpot JSON payloads.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class HubSpotModel(BaseModel):
    """
    Base for every request/response body.

    Attributes are snake_case in Python and camelCase on the wire. Optional
    fields default to ``None`` and are left out of the payload when unset,
    since the API rejects explicit nulls in several places.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_payload(self, partial: bool = False) -> Dict[str, Any]:
        """
        Serialize to a JSON-ready dict keyed by API field names.

        Args:
            partial: Only include the top-level fields the caller set or
                     changed from their defaults, including nested objects
                     edited in place (used for PATCH bodies). Nested objects
                     that are included are sent whole.
        """
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            include=self.changed_fields() if partial else None,
        )

    def changed_fields(self) -> set:
        """Names of fields explicitly set or differing from their default."""
        changed = set(self.model_fields_set)
        for name, field in type(self).model_fields.items():
            if name in changed:
                continue
            if getattr(self, name) != field.get_default(call_default_factory=True):
                changed.add(name)
        return changed


class NextPage(HubSpotModel):
    after: str = ""
    link: Optional[str] = None


class Paging(HubSpotModel):
    next: Optional[NextPage] = None

    @property
    def next_after(self) -> Optional[str]:
        """Cursor for the next page, or None on the last page."""
        if self.next is None or not self.next.after:
            return None
        return self.next.after


class PagedResponse(HubSpotModel):
    """Mixin-style base for list responses carrying a ``paging`` block."""

    paging: Optional[Paging] = None

    @property
    def next_after(self) -> Optional[str]:
        if self.paging is None:
            return None
        return self.paging.next_after

    @property
    def has_more(self) -> bool:
        return self.next_after is not None


class ListOptions(BaseModel):
    """
    Query options for list endpoints.

    Unset options are not sent. ``properties`` is comma-joined; ``form_types``
    is sent as a repeated ``formTypes`` parameter.
    """

    limit: Optional[int] = Field(default=None, gt=0)
    after: Optional[str] = None
    archived: Optional[bool] = None
    properties: Optional[list[str]] = None
    form_types: Optional[list[str]] = None

    def to_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if self.limit is not None:
            params["limit"] = self.limit
        if self.after:
            params["after"] = self.after
        if self.archived is not None:
            params["archived"] = "true" if self.archived else "false"
        if self.properties:
            params["properties"] = ",".join(self.properties)
        if self.form_types:
            params["formTypes"] = list(self.form_types)
        return params

    def next_page(self, after: str) -> "ListOptions":
        """Return a copy of these options pointing at the given cursor."""
        return self.model_copy(update={"after": after})
