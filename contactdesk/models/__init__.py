"""Database models package."""

from .contact import ContactSubmission, STATUS_CHOICES, EDITABLE_FIELDS

__all__ = [
    'ContactSubmission',
    'STATUS_CHOICES',
    'EDITABLE_FIELDS',
]
