"""Forms package."""

from .contact import ContactForm

__all__ = ['ContactForm']
