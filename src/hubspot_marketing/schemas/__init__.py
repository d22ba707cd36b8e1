"""
Request and response models for the HubSpot Marketing API.
"""

from .base import HubSpotModel, ListOptions, NextPage, PagedResponse, Paging
from .consent import (
    CommunicationCheckbox,
    CommunicationConsent,
    ConsentToProcess,
    ExplicitConsent,
    ImplicitConsent,
    LegalConsentOptions,
    LegitimateInterest,
    LegitimateInterestConsent,
    NoLegalConsent,
    SubmissionLegalConsentOptions,
)
from .emails import (
    EmailEventId,
    EmailSendStatus,
    MarketingEmail,
    MarketingEmailResponse,
    SendSingleEmailRequest,
    TransactionalMessage,
)
from .forms import (
    Form,
    FormConfiguration,
    FormDisplayOptions,
    FormDisplayStyle,
    FormField,
    FormFieldGroup,
    FormFieldOption,
    FormFieldValidation,
    FormLifecycleStage,
    FormPostSubmitAction,
    FormResponse,
)
from .submissions import (
    CONTACT_OBJECT_TYPE_ID,
    FormSubmission,
    FormSubmissionContext,
    FormSubmissionField,
    SubmissionValue,
)

__all__ = [
    "HubSpotModel",
    "ListOptions",
    "NextPage",
    "PagedResponse",
    "Paging",
    "CommunicationCheckbox",
    "CommunicationConsent",
    "ConsentToProcess",
    "ExplicitConsent",
    "ImplicitConsent",
    "LegalConsentOptions",
    "LegitimateInterest",
    "LegitimateInterestConsent",
    "NoLegalConsent",
    "SubmissionLegalConsentOptions",
    "EmailEventId",
    "EmailSendStatus",
    "MarketingEmail",
    "MarketingEmailResponse",
    "SendSingleEmailRequest",
    "TransactionalMessage",
    "Form",
    "FormConfiguration",
    "FormDisplayOptions",
    "FormDisplayStyle",
    "FormField",
    "FormFieldGroup",
    "FormFieldOption",
    "FormFieldValidation",
    "FormLifecycleStage",
    "FormPostSubmitAction",
    "FormResponse",
    "CONTACT_OBJECT_TYPE_ID",
    "FormSubmission",
    "FormSubmissionContext",
    "FormSubmissionField",
    "SubmissionValue",
]
