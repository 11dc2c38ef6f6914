"""
Contact submission workflow.

Runs a submission through validate, persist, notify, log and (on a
successful notification) welcome, in that order.
"""

import logging

from werkzeug.datastructures import MultiDict

from contactdesk.errors import ValidationError
from contactdesk.forms import ContactForm

logger = logging.getLogger(__name__)


class SubmissionHandler:
    """Coordinates the record store and notifier for one submission."""

    EMAIL_TYPE = 'contact_form'

    def __init__(self, store, notifier):
        self.store = store
        self.notifier = notifier

    def validate(self, payload):
        """
        Check required fields and return the cleaned contact fields.

        Raises ValidationError before anything is written or sent.
        """
        if not isinstance(payload, dict):
            payload = {}
        form = ContactForm(formdata=MultiDict(payload))
        if not form.validate():
            raise ValidationError(fields=form.errors)
        return form.contact_fields()

    def submit(self, payload):
        """
        Save a submission, notify the owner and log the notification.

        StorageError from either write propagates to the caller. A failed
        notification is still a successful submission.
        """
        fields = self.validate(payload)

        contact_id = self.store.create_contact(fields)

        outcome = self.notifier.send_contact_email(fields)
        status = 'sent' if outcome.success else 'failed'

        self.store.log_notification(
            contact_id,
            self.EMAIL_TYPE,
            status,
            None if outcome.success else outcome.error
        )

        if outcome.success:
            # Best-effort: the welcome outcome is neither stored nor returned.
            self.notifier.send_welcome_email(fields)
        else:
            logger.warning(f"Contact {contact_id} saved but notification failed: {outcome.error}")

        return {
            'success': True,
            'message': (
                'Contact information saved and email sent successfully'
                if outcome.success else
                'Contact information saved but email notification failed'
            ),
            'id': contact_id,
            'emailStatus': status
        }

    def send_only(self, payload):
        """Validate and send the owner notification without saving anything."""
        fields = self.validate(payload)
        return self.notifier.send_contact_email(fields)
