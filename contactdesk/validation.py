"""Request payload validation."""

from .errors import ValidationError
from .models import STATUS_CHOICES, EDITABLE_FIELDS

REQUIRED_FIELDS = ('name', 'email', 'service', 'message')


def _text(payload, key):
    """Return payload[key] as text.

    Numbers and booleans are converted the way they are written in JSON.
    A missing key, null, or an object/array value gives None.
    """
    value = payload.get(key)
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (int, float)):
        return str(value)
    return None


def validate_submission(payload):
    """Check a new submission and return the fields to store.

    Raises ValidationError if any required field is missing or empty.
    """
    fields = {key: _text(payload, key) for key in REQUIRED_FIELDS}
    if not all(fields.values()):
        raise ValidationError('All required fields must be filled.')

    fields['phone'] = _text(payload, 'phone') or ''
    return fields


def validate_status(value):
    """Status must be one of STATUS_CHOICES, compared exactly."""
    if not isinstance(value, str) or value not in STATUS_CHOICES:
        raise ValidationError('Invalid status')
    return value


def replace_fields(payload):
    """Pick the editable fields out of a replace request.

    No presence check: keys left out of the request keep their stored value.
    """
    return {key: _text(payload, key) for key in EDITABLE_FIELDS}
