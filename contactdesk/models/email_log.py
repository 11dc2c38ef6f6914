"""Email log model."""

from contactdesk.extensions import db
from .contact import utcnow

EMAIL_STATUSES = ('pending', 'sent', 'failed')


class EmailLog(db.Model):
    """One attempted notification send for a contact. Rows are never updated."""
    __tablename__ = 'email_logs'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    contact_id = db.Column(db.Integer, db.ForeignKey('contacts.id'))
    email_type = db.Column(db.Text, default='contact_form')
    status = db.Column(db.Text, default='pending')  # pending, sent, failed
    error_message = db.Column(db.Text)
    sent_at = db.Column(db.DateTime)  # only set when status is 'sent'
    created_at = db.Column(db.DateTime, default=utcnow)

    @staticmethod
    def create_entry(contact_id, email_type, status, error_message=None):
        """Build a log entry, stamping sent_at for successful sends."""
        if status not in EMAIL_STATUSES:
            raise ValueError(f'Unknown email status: {status}')
        return EmailLog(
            contact_id=contact_id,
            email_type=email_type,
            status=status,
            error_message=error_message if status == 'failed' else None,
            sent_at=utcnow() if status == 'sent' else None
        )

    def __repr__(self):
        return f'<EmailLog {self.email_type} {self.status}>'
