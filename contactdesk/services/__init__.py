"""Service layer package."""

from .submission import SubmissionHandler

__all__ = ['SubmissionHandler']
