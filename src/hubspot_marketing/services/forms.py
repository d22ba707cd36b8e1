"""
Marketing Forms v3 service.

Create, read, update and delete form definitions, and submit form data.
Every method makes exactly one HTTP request; errors from the transport are
raised unchanged.
"""

import logging
from typing import Any, Dict, Iterator, Optional, Union

from ..config import HSFORMS_API_BASE
from ..paths import FORMS_RESOURCE, MARKETING_BASE_PATH, item_path, resource_path
from ..schemas import Form, FormResponse, FormSubmission, ListOptions

logger = logging.getLogger(__name__)

SUBMIT_PATH_TEMPLATE = "/submissions/v3/integration/secure/submit/{portal_id}/{form_id}"


class FormService:
    """Client for ``marketing/{version}/forms``."""

    def __init__(self, client):
        self.client = client
        self.form_path = resource_path(MARKETING_BASE_PATH, client.api_version, FORMS_RESOURCE)

    def create(self, form: Form) -> Form:
        """
        Create a new form.

        The form is sent as-is; HubSpot performs all validation.

        Returns:
            The form as stored by HubSpot, including its assigned id
        """
        created = self.client.post(self.form_path, form, Form)
        logger.info("Created HubSpot form %s (%s)", created.id, created.name)
        return created

    def get(self, form_id: str) -> Form:
        """
        Fetch a form by id.

        Raises:
            HubSpotNotFoundException: If no form has this id
        """
        return self.client.get(item_path(self.form_path, form_id), Form)

    def list(self, options: Optional[ListOptions] = None) -> FormResponse:
        """
        Fetch one page of forms.

        Args:
            options: Paging cursor, page size and filters

        Returns:
            The page; ``response.next_after`` is the cursor for the next
            page or None on the last page
        """
        params = options.to_params() if options else None
        response = self.client.get(self.form_path, FormResponse, params=params)
        logger.debug("Retrieved %d HubSpot forms", len(response.results))
        return response

    def iter_forms(self, options: Optional[ListOptions] = None) -> Iterator[Form]:
        """Yield every form, following paging cursors until the last page."""
        options = options or ListOptions()
        while True:
            page = self.list(options)
            yield from page.results
            if not page.has_more:
                return
            if page.next_after == options.after:
                logger.warning("Forms cursor %s repeated, stopping pagination", options.after)
                return
            options = options.next_page(page.next_after)

    def update(self, form_id: str, form: Union[Form, Dict[str, Any]]) -> Form:
        """
        Update an existing form.

        Args:
            form_id: Id of the form to update
            form: A Form carrying only the fields to change, or a raw dict

        Returns:
            The form after the update

        Raises:
            ValueError: If a Form is given with nothing changed on it
        """
        if isinstance(form, Form) and not form.changed_fields():
            raise ValueError(f"No changes to send for form {form_id}")

        updated = self.client.patch(item_path(self.form_path, form_id), form, Form)
        logger.info("Updated HubSpot form %s", form_id)
        return updated

    def delete(self, form_id: str) -> None:
        """Archive a form."""
        self.client.delete(item_path(self.form_path, form_id))
        logger.info("Deleted HubSpot form %s", form_id)

    def submit(self, portal_id: str, form_id: str, submission: FormSubmission) -> None:
        """
        Submit data to a form.

        The v3 Forms API has no submission endpoint, so this goes to the
        legacy integration endpoint on api.hsforms.com using a derived client.
        """
        forms_client = self.client.with_base_url(HSFORMS_API_BASE)
        path = SUBMIT_PATH_TEMPLATE.format(portal_id=portal_id, form_id=form_id)

        forms_client.post(path, submission)
        logger.info("Submitted form %s for portal %s", form_id, portal_id)
