"""Error types raised by the validation layer and the record store."""


class ContactDeskError(Exception):
    """Base class for application errors."""
    status_code = 500
    public_message = 'Internal server error'


class ValidationError(ContactDeskError):
    """Missing required field or invalid status value."""
    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.public_message = message


class NotFound(ContactDeskError):
    """No record matches the requested id."""
    status_code = 404
    public_message = 'Contact not found'


class PersistenceError(ContactDeskError):
    """The database was unreachable or rejected a write."""
