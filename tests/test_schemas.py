"""
Tests for request/response models: wire names, omission of unset optional
fields, tagged consent variants and scalar submission values.
"""

import pytest
from pydantic import ValidationError

from hubspot_marketing.schemas import (
    CommunicationCheckbox,
    ConsentToProcess,
    ExplicitConsent,
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
    FormSubmission,
    FormSubmissionContext,
    FormSubmissionField,
    ImplicitConsent,
    LegitimateInterest,
    LegitimateInterestConsent,
    ListOptions,
    NoLegalConsent,
    SendSingleEmailRequest,
    SubmissionLegalConsentOptions,
    TransactionalMessage,
)


@pytest.fixture
def full_form():
    """A form with every section populated."""
    return Form(
        id="f-1",
        name="Contact Us",
        created_at="2024-01-01T00:00:00Z",
        updated_at="2024-01-02T00:00:00Z",
        field_groups=[
            FormFieldGroup(
                group_type="default_group",
                rich_text_type="text",
                fields=[
                    FormField(
                        object_type_id="0-1",
                        name="email",
                        label="Email",
                        required=True,
                        field_type="email",
                        validation=FormFieldValidation(
                            blocked_email_domains=["example.com"],
                            use_default_block_list=True,
                        ),
                    ),
                ],
            ),
            FormFieldGroup(
                group_type="default_group",
                rich_text_type="text",
                fields=[
                    FormField(
                        object_type_id="0-1",
                        name="country",
                        label="Country",
                        field_type="dropdown",
                        options=[
                            FormFieldOption(label="Canada", value="CA"),
                            FormFieldOption(label="Mexico", value="MX"),
                        ],
                        dependent_fields=["state"],
                    ),
                    FormField(object_type_id="0-1", name="state", label="State", field_type="single_line_text"),
                ],
            ),
        ],
        configuration=FormConfiguration(
            language="en",
            cloneable=True,
            post_submit_action=FormPostSubmitAction(type="thank_you", value="Thanks!"),
            notify_recipients=["123"],
            lifecycle_stages=[FormLifecycleStage(object_type_id="0-1", value="lead")],
        ),
        display_options=FormDisplayOptions(
            theme="default_style",
            submit_button_text="Submit",
            style=FormDisplayStyle(font_family="arial", submit_color="#ff0000"),
        ),
        legal_consent_options=ExplicitConsent(
            communication_consent_text="We would like to contact you",
            communications_checkboxes=[
                CommunicationCheckbox(required=True, subscription_type_id=99, label="Newsletter")
            ],
            consent_to_process_text="We need to store your data",
            consent_to_process_checkbox_label="I agree",
            privacy_text="Privacy policy",
        ),
        form_type="hubspot",
        properties={"campaign": "spring"},
    )


# ---------------------------------------------------------------------------
# Tests: Form encoding
# ---------------------------------------------------------------------------

def test_form_round_trip(full_form):
    restored = Form.model_validate(full_form.to_payload())
    assert restored == full_form


def test_field_group_order_preserved(full_form):
    payload = full_form.to_payload()
    restored = Form.model_validate(payload)

    assert [f["name"] for g in payload["fieldGroups"] for f in g["fields"]] == ["email", "country", "state"]
    assert restored.field_names() == ["email", "country", "state"]
    assert [o.value for o in restored.field_groups[1].fields[0].options] == ["CA", "MX"]


def test_payload_uses_camel_case_names(full_form):
    payload = full_form.to_payload()

    assert payload["fieldGroups"][0]["richTextType"] == "text"
    assert payload["fieldGroups"][0]["fields"][0]["objectTypeId"] == "0-1"
    assert payload["configuration"]["postSubmitAction"] == {"type": "thank_you", "value": "Thanks!"}
    assert payload["configuration"]["createNewContactForNewEmail"] is False
    assert payload["displayOptions"]["style"]["submitColor"] == "#ff0000"
    assert payload["legalConsentOptions"]["type"] == "explicit_consent_to_process"
    assert payload["legalConsentOptions"]["communicationsCheckboxes"][0]["subscriptionTypeId"] == 99


def test_unset_optional_fields_omitted():
    payload = Form(name="Contact Us").to_payload()

    for key in ("id", "createdAt", "updatedAt", "archived", "legalConsentOptions",
                "formType", "action", "method", "redirectUrl", "properties"):
        assert key not in payload
    assert payload["name"] == "Contact Us"
    assert payload["fieldGroups"] == []
    assert payload["configuration"]["notifyRecipients"] == []
    assert payload["displayOptions"]["style"]["fontFamily"] == ""


def test_unset_optional_field_attributes_omitted():
    payload = FormField(name="email", field_type="email").to_payload()

    assert payload == {
        "objectTypeId": "",
        "name": "email",
        "label": "",
        "required": False,
        "hidden": False,
        "fieldType": "email",
    }


def test_partial_payload_only_has_set_fields():
    form = Form(name="Renamed", configuration=FormConfiguration(language="fr"))
    payload = form.to_payload(partial=True)

    assert set(payload) == {"name", "configuration"}
    assert payload["configuration"]["language"] == "fr"
    assert payload["configuration"]["postSubmitAction"] == {"type": "", "value": ""}


def test_form_accepts_api_names():
    form = Form.model_validate({"id": "1", "name": "x", "redirectUrl": "https://example.com", "unknownField": 1})
    assert form.redirect_url == "https://example.com"


# ---------------------------------------------------------------------------
# Tests: Legal consent variants
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "payload,expected",
    [
        ({"type": "none"}, NoLegalConsent),
        ({"type": "legitimate_interest", "privacyText": "p", "subscriptionTypeIds": [1]}, LegitimateInterestConsent),
        ({"type": "explicit_consent_to_process", "consentToProcessText": "c"}, ExplicitConsent),
        ({"type": "explicit_consent", "consentToProcessText": "c"}, ExplicitConsent),
        ({"type": "implicit_consent_to_process", "privacyText": "p"}, ImplicitConsent),
    ],
)
def test_legal_consent_selected_by_type(payload, expected):
    form = Form.model_validate({"name": "x", "legalConsentOptions": payload})
    assert isinstance(form.legal_consent_options, expected)


def test_legitimate_interest_has_no_checkbox_fields():
    consent = LegitimateInterestConsent(privacy_text="p")
    assert not hasattr(consent, "communications_checkboxes")
    assert consent.to_payload() == {"type": "legitimate_interest", "privacyText": "p"}


def test_unknown_consent_type_rejected():
    with pytest.raises(ValidationError):
        Form.model_validate({"name": "x", "legalConsentOptions": {"type": "telepathic"}})


def test_partial_payload_keeps_consent_type():
    form = Form(legal_consent_options=ImplicitConsent(privacy_text="p"))
    payload = form.to_payload(partial=True)
    assert payload["legalConsentOptions"]["type"] == "implicit_consent_to_process"


# ---------------------------------------------------------------------------
# Tests: Submissions
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "value,expected_type",
    [("hello", str), ("42", str), (42, int), (4.5, float), (True, bool), (False, bool)],
)
def test_submission_value_kept_without_coercion(value, expected_type):
    field = FormSubmissionField.model_validate({"objectTypeId": "0-1", "name": "f", "value": value})
    assert type(field.value) is expected_type
    assert field.value == value
    assert field.to_payload()["value"] == value


def test_submission_value_rejects_non_scalar():
    with pytest.raises(ValidationError):
        FormSubmissionField(name="f", value=["a", "b"])


def test_submission_payload():
    submission = FormSubmission(
        context=FormSubmissionContext(page_uri="https://example.com/contact", page_name="Contact"),
    )
    submission.add_field("email", "jane@example.com").add_field("employees", 12)

    payload = submission.to_payload()

    assert payload["fields"] == [
        {"objectTypeId": "0-1", "name": "email", "value": "jane@example.com"},
        {"objectTypeId": "0-1", "name": "employees", "value": 12},
    ]
    assert payload["context"] == {"pageUri": "https://example.com/contact", "pageName": "Contact"}
    assert "legalConsentOptions" not in payload


def test_submission_consent_to_process():
    options = SubmissionLegalConsentOptions(
        consent=ConsentToProcess(consent_to_process=True, text="I agree")
    )
    assert options.to_payload() == {"consent": {"consentToProcess": True, "text": "I agree"}}


def test_submission_legitimate_interest():
    options = SubmissionLegalConsentOptions(
        legitimate_interest=LegitimateInterest(
            value=True, subscription_type_id=999, legal_basis="LEGITIMATE_INTEREST_CLIENT", text="t"
        )
    )
    payload = options.to_payload()
    assert payload["legitimateInterest"]["legalBasis"] == "LEGITIMATE_INTEREST_CLIENT"
    assert "consent" not in payload


def test_submission_consent_requires_exactly_one_case():
    with pytest.raises(ValidationError):
        SubmissionLegalConsentOptions()
    with pytest.raises(ValidationError):
        SubmissionLegalConsentOptions(
            consent=ConsentToProcess(consent_to_process=True),
            legitimate_interest=LegitimateInterest(value=True),
        )


# ---------------------------------------------------------------------------
# Tests: Paging
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "payload",
    [
        {"results": []},
        {"results": [], "paging": {}},
        {"results": [], "paging": {"next": {}}},
        {"results": [], "paging": {"next": {"after": ""}}},
    ],
)
def test_no_next_page(payload):
    response = FormResponse.model_validate(payload)
    assert response.next_after is None
    assert response.has_more is False


def test_next_page_cursor():
    response = FormResponse.model_validate(
        {"results": [{"id": "1", "name": "a"}], "paging": {"next": {"after": "NTI1Cg%3D%3D", "link": "?after=NTI1Cg%3D%3D"}}}
    )
    assert response.next_after == "NTI1Cg%3D%3D"
    assert response.has_more is True
    assert response.results[0].name == "a"


# ---------------------------------------------------------------------------
# Tests: List options
# ---------------------------------------------------------------------------

def test_list_options_empty():
    assert ListOptions().to_params() == {}


def test_list_options_params():
    options = ListOptions(limit=20, after="abc", archived=False, properties=["name", "id"], form_types=["hubspot", "flow"])
    assert options.to_params() == {
        "limit": 20,
        "after": "abc",
        "archived": "false",
        "properties": "name,id",
        "formTypes": ["hubspot", "flow"],
    }


def test_list_options_empty_cursor_not_sent():
    assert "after" not in ListOptions(after="").to_params()


def test_list_options_next_page():
    options = ListOptions(limit=5)
    nxt = options.next_page("cursor-2")
    assert nxt.after == "cursor-2"
    assert nxt.limit == 5
    assert options.after is None


# ---------------------------------------------------------------------------
# Tests: Transactional email
# ---------------------------------------------------------------------------

def test_send_single_email_payload():
    request = SendSingleEmailRequest(
        email_id=4126643121,
        message=TransactionalMessage(to="jane@example.com", sender="news@example.com", send_id="s-1"),
        contact_properties={"firstname": "Jane"},
    )
    assert request.to_payload() == {
        "emailId": 4126643121,
        "message": {"to": "jane@example.com", "from": "news@example.com", "sendId": "s-1"},
        "contactProperties": {"firstname": "Jane"},
    }


def test_partial_payload_includes_nested_edit_in_place():
    form = Form()
    form.configuration.language = "fr"

    payload = form.to_payload(partial=True)

    assert set(payload) == {"configuration"}
    assert payload["configuration"]["language"] == "fr"


def test_partial_payload_includes_appended_field_group():
    form = Form()
    form.field_groups.append(FormFieldGroup(group_type="default_group"))

    payload = form.to_payload(partial=True)

    assert set(payload) == {"fieldGroups"}
    assert payload["fieldGroups"][0]["groupType"] == "default_group"


def test_unchanged_form_has_no_changed_fields():
    assert Form().changed_fields() == set()
    assert Form().to_payload(partial=True) == {}


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_submission_value_rejects_non_finite_float(value):
    with pytest.raises(ValidationError):
        FormSubmissionField(name="f", value=value)
