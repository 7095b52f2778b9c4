"""Contact submission model."""

from datetime import datetime
import uuid
from contactdesk.extensions import db


STATUS_CHOICES = ('new', 'in-progress', 'resolved')

EDITABLE_FIELDS = ('name', 'email', 'phone', 'service', 'message')


class ContactSubmission(db.Model):
    """Contact form submissions."""
    __tablename__ = 'contact_submissions'

    # Internal key, only used to keep listing order stable
    pk = db.Column(db.Integer, primary_key=True, autoincrement=True)
    id = db.Column(db.String(32), unique=True, nullable=False, index=True,
                   default=lambda: uuid.uuid4().hex)

    name = db.Column(db.String(200), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(50), nullable=False, default='')
    service = db.Column(db.String(200), nullable=False)
    message = db.Column(db.Text, nullable=False)
    status = db.Column(db.String(20), nullable=False, default='new')  # new, in-progress, resolved
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, index=True)

    __table_args__ = (
        db.CheckConstraint(
            "status IN ('new', 'in-progress', 'resolved')",
            name='ck_contact_submissions_status'
        ),
    )

    def to_dict(self):
        """Serialize to the public JSON shape."""
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'service': self.service,
            'message': self.message,
            'status': self.status,
            'createdAt': self.created_at.isoformat(timespec='milliseconds') + 'Z',
        }

    def __repr__(self):
        return f'<ContactSubmission {self.id} {self.status}>'
