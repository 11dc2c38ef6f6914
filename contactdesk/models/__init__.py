"""Database models package."""

from .contact import Contact
from .email_log import EmailLog, EMAIL_STATUSES

__all__ = [
    'Contact',
    'EmailLog',
    'EMAIL_STATUSES',
]
