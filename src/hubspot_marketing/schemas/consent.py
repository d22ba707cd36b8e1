"""
Legal consent models.

A form definition carries one of several consent layouts, selected by its
``type`` tag. Each layout is its own model holding only the fields that
apply to it; ``LegalConsentOptions`` is the tagged union of all of them.

Submissions use a different shape: either explicit ``consent`` to process
or a ``legitimateInterest`` basis, never both.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import Field, model_validator

from .base import HubSpotModel


class CommunicationCheckbox(HubSpotModel):
    required: bool = False
    subscription_type_id: int = 0
    label: str = ""


class NoLegalConsent(HubSpotModel):
    type: Literal["none"] = "none"


class LegitimateInterestConsent(HubSpotModel):
    type: Literal["legitimate_interest"] = "legitimate_interest"
    privacy_text: str = ""
    subscription_type_ids: Optional[list[int]] = None
    lawful_basis: Optional[str] = None


class ExplicitConsent(HubSpotModel):
    type: Literal["explicit_consent_to_process", "explicit_consent"] = "explicit_consent_to_process"
    communication_consent_text: str = ""
    communications_checkboxes: list[CommunicationCheckbox] = Field(default_factory=list)
    consent_to_process_text: str = ""
    consent_to_process_checkbox_label: str = ""
    privacy_text: str = ""


class ImplicitConsent(HubSpotModel):
    type: Literal["implicit_consent_to_process"] = "implicit_consent_to_process"
    communication_consent_text: str = ""
    communications_checkboxes: list[CommunicationCheckbox] = Field(default_factory=list)
    consent_to_process_text: str = ""
    privacy_text: str = ""


LegalConsentOptions = Annotated[
    Union[NoLegalConsent, LegitimateInterestConsent, ExplicitConsent, ImplicitConsent],
    Field(discriminator="type"),
]


# ----------------------------------------------------------------------
# Submission-side consent
# ----------------------------------------------------------------------


class CommunicationConsent(HubSpotModel):
    value: bool = False
    subscription_type_id: int = 0
    text: str = ""


class ConsentToProcess(HubSpotModel):
    consent_to_process: bool = False
    text: str = ""
    communications: Optional[list[CommunicationConsent]] = None


class LegitimateInterest(HubSpotModel):
    value: bool = False
    subscription_type_id: int = 0
    # LEGITIMATE_INTEREST_PQL or LEGITIMATE_INTEREST_CLIENT
    legal_basis: str = ""
    text: str = ""


class SubmissionLegalConsentOptions(HubSpotModel):
    """Consent given with a submission: exactly one of the two cases."""

    consent: Optional[ConsentToProcess] = None
    legitimate_interest: Optional[LegitimateInterest] = None

    @model_validator(mode="after")
    def exactly_one_basis(self):
        if (self.consent is None) == (self.legitimate_interest is None):
            raise ValueError("exactly one of consent or legitimateInterest must be set")
        return self
