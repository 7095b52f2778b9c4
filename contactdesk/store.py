"""Record store for contact submissions.

Wraps a SQLAlchemy session. Each mutating call commits before it returns;
on a database error the session is rolled back and PersistenceError is
raised with the original exception chained.
"""

from functools import wraps
from sqlalchemy.exc import SQLAlchemyError
from .errors import PersistenceError
from .models import ContactSubmission, EDITABLE_FIELDS


def _persistence_guard(f):
    """Turn SQLAlchemy failures into PersistenceError."""
    @wraps(f)
    def decorated_function(self, *args, **kwargs):
        try:
            self._ensure_schema()
            return f(self, *args, **kwargs)
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise PersistenceError(str(exc)) from exc
    return decorated_function


class ContactStore:
    """Persistence operations for ContactSubmission records."""

    def __init__(self, session, create_schema=None):
        self.session = session
        self._create_schema = create_schema
        self._schema_ready = create_schema is None

    def _ensure_schema(self):
        if not self._schema_ready:
            self._create_schema()
            self._schema_ready = True

    @_persistence_guard
    def ensure_schema(self):
        """Create the tables now if they have not been created yet."""

    def _get(self, record_id):
        return self.session.query(ContactSubmission).filter_by(id=record_id).first()

    @_persistence_guard
    def insert(self, fields):
        """Store a new submission with status 'new' and return it."""
        record = ContactSubmission(
            name=fields.get('name'),
            email=fields.get('email'),
            phone=fields.get('phone') or '',
            service=fields.get('service'),
            message=fields.get('message'),
            status='new'
        )
        self.session.add(record)
        self.session.commit()
        return record

    @_persistence_guard
    def list_all(self):
        """All submissions, newest first."""
        return self.session.query(ContactSubmission).order_by(
            ContactSubmission.created_at.desc(),
            ContactSubmission.pk.desc()
        ).all()

    @_persistence_guard
    def replace_by_id(self, record_id, fields):
        """Overwrite the editable fields present in `fields`.

        Returns the updated record, or None if `record_id` is unknown.
        """
        record = self._get(record_id)
        if record is None:
            return None

        for key in EDITABLE_FIELDS:
            if fields.get(key) is not None:
                setattr(record, key, fields[key])

        self.session.commit()
        return record

    @_persistence_guard
    def patch_status_by_id(self, record_id, status):
        """Set the status of a record. Returns None if `record_id` is unknown."""
        record = self._get(record_id)
        if record is None:
            return None

        record.status = status
        self.session.commit()
        return record

    @_persistence_guard
    def delete_by_id(self, record_id):
        """Delete a record. Returns False if `record_id` is unknown."""
        record = self._get(record_id)
        if record is None:
            return False

        self.session.delete(record)
        self.session.commit()
        return True

    @_persistence_guard
    def count(self):
        return self.session.query(ContactSubmission).count()
