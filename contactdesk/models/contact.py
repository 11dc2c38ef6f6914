"""Contact model."""

from datetime import datetime, timezone
from contactdesk.extensions import db


def utcnow():
    """Current UTC time as a naive datetime, matching the stored columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Contact(db.Model):
    """Contact form submissions."""
    __tablename__ = 'contacts'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.Text, nullable=False)
    email = db.Column(db.Text, nullable=False)
    company = db.Column(db.Text, default='')
    message = db.Column(db.Text, nullable=False)
    phone = db.Column(db.Text, default='')
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow)

    def __repr__(self):
        return f'<Contact {self.id} {self.email}>'
