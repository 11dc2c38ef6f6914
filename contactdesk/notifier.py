"""
EmailJS notification service.

Sends the owner acknowledgment and the submitter welcome email through the
EmailJS REST API. Every send resolves to a NotificationOutcome; provider and
network faults are never raised to the caller.

EmailJS REST API documentation:
https://www.emailjs.com/docs/rest-api/send/
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from .errors import ProviderError

logger = logging.getLogger(__name__)


@dataclass
class NotificationOutcome:
    """Result of one send: either sent (message_id) or failed (error, details)."""
    success: bool
    message_id: Optional[str] = None
    message: Optional[str] = None
    error: Optional[str] = None
    details: Any = None

    @classmethod
    def sent(cls, message_id, message):
        return cls(success=True, message_id=message_id, message=message)

    @classmethod
    def failed(cls, error, details=None):
        return cls(success=False, error=error, details=details)

    def details_dict(self) -> Optional[Dict]:
        """JSON-safe description of the fault behind a failed send."""
        if self.details is None:
            return None
        described = {
            'type': type(self.details).__name__,
            'message': str(self.details),
        }
        status = getattr(self.details, 'status', None)
        if status is not None:
            described['status'] = status
        return described

    def to_dict(self) -> Dict:
        if self.success:
            return {
                'success': True,
                'messageId': self.message_id,
                'message': self.message,
            }
        return {
            'success': False,
            'error': self.error,
            'details': self.details_dict(),
        }


class Notifier:
    """
    Client for the EmailJS send endpoint.

    Settings are read once at construction. ``session`` may be any object with
    a ``requests``-compatible ``post`` method; by default each send goes
    through ``requests.post`` so worker threads never share a connection pool.
    """

    DEFAULT_API_URL = "https://api.emailjs.com/api/v1.0/email/send"

    # Required settings, in the order they are reported as missing
    REQUIRED_SETTINGS = (
        ('EMAILJS_SERVICE_ID', 'service_id'),
        ('EMAILJS_TEMPLATE_ID', 'template_id'),
        ('EMAILJS_PUBLIC_KEY', 'public_key'),
        ('EMAILJS_PRIVATE_KEY', 'private_key'),
        ('TO_EMAIL', 'to_email'),
    )

    WELCOME_FROM_NAME = 'Logistics AI Platform'
    WELCOME_MESSAGE = (
        'Thank you for your interest in our Logistics AI Platform. '
        'We have received your inquiry and will get back to you within 24 hours.'
    )

    def __init__(
        self,
        service_id: Optional[str] = None,
        template_id: Optional[str] = None,
        public_key: Optional[str] = None,
        private_key: Optional[str] = None,
        to_email: Optional[str] = None,
        welcome_template_id: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout: float = 10,
        session=None
    ):
        self.service_id = service_id
        self.template_id = template_id
        self.public_key = public_key
        self.private_key = private_key
        self.to_email = to_email
        self.welcome_template_id = welcome_template_id
        self.api_url = api_url or self.DEFAULT_API_URL
        self.timeout = timeout
        self.session = session or requests

        missing = self.validate_configuration()['missing']
        if missing:
            logger.warning(
                "EmailJS configuration incomplete. Missing: %s", ', '.join(missing)
            )

    @classmethod
    def from_config(cls, config, session=None) -> 'Notifier':
        """Build a notifier from a Flask config mapping."""
        return cls(
            service_id=config.get('EMAILJS_SERVICE_ID'),
            template_id=config.get('EMAILJS_TEMPLATE_ID'),
            public_key=config.get('EMAILJS_PUBLIC_KEY'),
            private_key=config.get('EMAILJS_PRIVATE_KEY'),
            to_email=config.get('TO_EMAIL'),
            welcome_template_id=config.get('EMAILJS_WELCOME_TEMPLATE_ID'),
            api_url=config.get('EMAILJS_API_URL'),
            timeout=config.get('EMAIL_TIMEOUT', 10),
            session=session
        )

    def validate_configuration(self) -> Dict:
        """Report which required settings are unset."""
        missing: List[str] = [
            name for name, attr in self.REQUIRED_SETTINGS if not getattr(self, attr)
        ]
        return {
            'is_valid': len(missing) == 0,
            'missing': missing,
        }

    def send_contact_email(self, contact: Dict) -> NotificationOutcome:
        """
        Notify the site owner about a new submission.

        Args:
            contact: dict with name, email, message and optional company, phone

        Returns:
            NotificationOutcome: never raises
        """
        try:
            template_params = {
                'from_name': contact.get('name'),
                'from_email': contact.get('email'),
                'company': contact.get('company') or 'Not specified',
                'phone': contact.get('phone') or 'Not provided',
                'message': contact.get('message'),
                'to_email': self.to_email,
                'reply_to': contact.get('email'),
            }
            message_id = self._send(self.template_id, template_params)

            logger.info(f"Contact email sent for {contact.get('email')}. MessageId: {message_id}")
            return NotificationOutcome.sent(message_id, 'Email sent successfully')

        except Exception as e:
            logger.error(f"EmailJS error sending contact email: {e}")
            return NotificationOutcome.failed(str(e) or 'Failed to send email', e)

    def send_welcome_email(self, contact: Dict) -> NotificationOutcome:
        """Thank the submitter for getting in touch. Never raises."""
        try:
            template_params = {
                'to_name': contact.get('name'),
                'to_email': contact.get('email'),
                'from_name': self.WELCOME_FROM_NAME,
                'message': self.WELCOME_MESSAGE,
            }
            message_id = self._send(
                self.welcome_template_id or self.template_id, template_params
            )

            logger.info(f"Welcome email sent to {contact.get('email')}. MessageId: {message_id}")
            return NotificationOutcome.sent(message_id, 'Welcome email sent successfully')

        except Exception as e:
            logger.error(f"EmailJS error sending welcome email: {e}")
            return NotificationOutcome.failed(str(e) or 'Failed to send welcome email', e)

    def _send(self, template_id: Optional[str], template_params: Dict) -> str:
        """POST one templated email; returns the provider's response text."""
        missing = self.validate_configuration()['missing']
        if missing:
            raise ProviderError(f"Email service not configured. Missing: {', '.join(missing)}")

        payload = {
            'service_id': self.service_id,
            'template_id': template_id,
            'user_id': self.public_key,
            'accessToken': self.private_key,
            'template_params': template_params,
        }

        try:
            response = self.session.post(self.api_url, json=payload, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise ProviderError('Request timeout') from e
        except requests.exceptions.RequestException as e:
            raise ProviderError(f'Network error: {e}') from e

        if response.status_code != 200:
            raise ProviderError(
                (response.text or '').strip() or f'EmailJS returned HTTP {response.status_code}',
                status=response.status_code
            )
        return response.text
