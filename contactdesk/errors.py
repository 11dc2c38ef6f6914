"""Exception types shared by the store, notifier and request handlers."""


class ContactDeskError(Exception):
    """Base class for application errors."""


class ValidationError(ContactDeskError):
    """A submission is missing one or more required fields."""

    def __init__(self, fields=None, message='Name, email, and message are required'):
        super().__init__(message)
        self.message = message
        self.fields = fields or {}


class StorageError(ContactDeskError):
    """A read or write against the contact database failed."""


class ProviderError(ContactDeskError):
    """The email delivery provider rejected or failed a send."""

    def __init__(self, message, status=None):
        super().__init__(message)
        self.message = message
        self.status = status
