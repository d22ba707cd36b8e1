"""
Form submission models for the legacy hsforms submission endpoint.
"""

from typing import Annotated, Optional, Union

from pydantic import Field, StrictBool, StrictFloat, StrictInt, StrictStr
from pydantic.types import AllowInfNan

from .base import HubSpotModel
from .consent import SubmissionLegalConsentOptions

# HubSpot object type id for contacts
CONTACT_OBJECT_TYPE_ID = "0-1"

# Scalar submitted for a field. Strict members so that neither side coerces:
# JSON true stays a bool, "42" stays a string, 42 stays an int. NaN and
# infinity have no JSON form.
SubmissionValue = Union[
    StrictBool, StrictInt, Annotated[StrictFloat, AllowInfNan(False)], StrictStr
]


class FormSubmissionField(HubSpotModel):
    object_type_id: str = CONTACT_OBJECT_TYPE_ID
    name: str
    value: SubmissionValue


class FormSubmissionContext(HubSpotModel):
    page_uri: str = ""
    page_name: str = ""
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    # epoch milliseconds
    timestamp: Optional[int] = None
    # hubspotutk cookie value
    hutk: Optional[str] = None


class FormSubmission(HubSpotModel):
    fields: list[FormSubmissionField] = Field(default_factory=list)
    context: FormSubmissionContext = Field(default_factory=FormSubmissionContext)
    legal_consent_options: Optional[SubmissionLegalConsentOptions] = None

    def add_field(
        self,
        name: str,
        value: SubmissionValue,
        object_type_id: str = CONTACT_OBJECT_TYPE_ID,
    ) -> "FormSubmission":
        """Append a field value and return self for chaining."""
        self.fields.append(
            FormSubmissionField(object_type_id=object_type_id, name=name, value=value)
        )
        return self
