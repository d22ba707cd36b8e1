"""
Form definition models for the Marketing Forms v3 API.

Field group and field order is display order and is preserved as received.
"""

from typing import Any, Dict, Optional

from pydantic import Field

from .base import HubSpotModel, PagedResponse
from .consent import LegalConsentOptions


class FormFieldValidation(HubSpotModel):
    blocked_email_domains: Optional[list[str]] = None
    use_default_block_list: Optional[bool] = None


class FormFieldOption(HubSpotModel):
    label: str = ""
    value: str = ""


class FormField(HubSpotModel):
    """
    A single input on a form.

    ``dependent_fields`` names other fields of the same form; the API checks
    that they exist, this client does not.
    """

    object_type_id: str = ""
    name: str = ""
    label: str = ""
    required: bool = False
    hidden: bool = False
    field_type: str = ""
    validation: Optional[FormFieldValidation] = None
    placeholder: Optional[str] = None
    help_text: Optional[str] = None
    options: Optional[list[FormFieldOption]] = None
    properties: Optional[Dict[str, Any]] = None
    dependent_fields: Optional[list[str]] = None


class FormFieldGroup(HubSpotModel):
    group_type: str = ""
    rich_text_type: str = ""
    fields: list[FormField] = Field(default_factory=list)


class FormPostSubmitAction(HubSpotModel):
    # "thank_you" or "redirect_url"
    type: str = ""
    value: str = ""


class FormLifecycleStage(HubSpotModel):
    object_type_id: str = ""
    value: str = ""


class FormConfiguration(HubSpotModel):
    language: str = ""
    cloneable: bool = False
    post_submit_action: FormPostSubmitAction = Field(default_factory=FormPostSubmitAction)
    editable: bool = False
    archivable: bool = False
    recaptcha_enabled: bool = False
    notify_contact_owner: bool = False
    notify_recipients: list[str] = Field(default_factory=list)
    create_new_contact_for_new_email: bool = False
    pre_populate_known_values: bool = False
    allow_link_to_reset_known_values: bool = False
    lifecycle_stages: list[FormLifecycleStage] = Field(default_factory=list)


class FormDisplayStyle(HubSpotModel):
    font_family: str = ""
    background_width: str = ""
    label_text_color: str = ""
    label_text_size: str = ""
    help_text_color: str = ""
    help_text_size: str = ""
    legal_consent_text_color: str = ""
    legal_consent_text_size: str = ""
    submit_color: str = ""
    submit_alignment: str = ""
    submit_font_color: str = ""
    submit_size: str = ""


class FormDisplayOptions(HubSpotModel):
    render_raw_html: bool = False
    theme: str = ""
    submit_button_text: str = ""
    style: FormDisplayStyle = Field(default_factory=FormDisplayStyle)
    css_class: str = ""


class Form(HubSpotModel):
    """A HubSpot form definition."""

    id: Optional[str] = None
    name: str = ""
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    archived: Optional[bool] = None
    field_groups: list[FormFieldGroup] = Field(default_factory=list)
    configuration: FormConfiguration = Field(default_factory=FormConfiguration)
    display_options: FormDisplayOptions = Field(default_factory=FormDisplayOptions)
    legal_consent_options: Optional[LegalConsentOptions] = None
    form_type: Optional[str] = None
    action: Optional[str] = None
    method: Optional[str] = None
    redirect_url: Optional[str] = None
    properties: Optional[Dict[str, Any]] = None

    def iter_fields(self):
        """Yield every field across all groups, in display order."""
        for group in self.field_groups:
            yield from group.fields

    def field_names(self) -> list[str]:
        return [f.name for f in self.iter_fields()]


class FormResponse(PagedResponse):
    """One page of forms from the list endpoint."""

    results: list[Form] = Field(default_factory=list)
