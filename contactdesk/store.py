"""Persistence for contacts and their email log entries."""

import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from .errors import StorageError
from .extensions import db
from .models import Contact, EmailLog
from .models.contact import utcnow

logger = logging.getLogger(__name__)


def _isoformat(value):
    return value.isoformat() if value else None


class RecordStore:
    """Create/read access to the ``contacts`` and ``email_logs`` tables.

    Every write commits on its own. Nothing ties a contact insert to the log
    insert that follows it, so a contact may exist without any log entry.
    """

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        """Create both tables if they do not exist yet."""
        with app.app_context():
            try:
                db.create_all()
            except SQLAlchemyError as e:
                logger.exception('Error creating database schema')
                raise StorageError(f'Could not initialize schema: {e}') from e
        logger.info('Contacts and email logs tables ready')

    def create_contact(self, fields):
        """Insert a contact and return its new id.

        ``company`` and ``phone`` are stored as empty strings when missing.
        """
        now = utcnow()
        contact = Contact(
            name=fields.get('name'),
            email=fields.get('email'),
            company=fields.get('company') or '',
            message=fields.get('message'),
            phone=fields.get('phone') or '',
            created_at=now,
            updated_at=now
        )
        self._commit(contact, 'contact')
        logger.debug('Saved contact %s', contact.id)
        return contact.id

    def log_notification(self, contact_id, email_type='contact_form', status='pending',
                         error_message=None):
        """Insert one email log row and return its id."""
        entry = EmailLog.create_entry(contact_id, email_type, status, error_message)
        self._commit(entry, 'email log')
        logger.debug('Logged %s email for contact %s: %s', email_type, contact_id, status)
        return entry.id

    def list_contacts(self):
        """All contacts joined with their log entries, newest contact first."""
        query = self._joined_query().order_by(
            Contact.created_at.desc(),
            Contact.id.desc(),
            EmailLog.id.asc()
        )
        return [self._row_view(contact, log) for contact, log in self._fetch(query.all)]

    def get_contact(self, contact_id):
        """First joined row for ``contact_id``, or None if it does not exist."""
        query = self._joined_query().filter(Contact.id == contact_id).order_by(EmailLog.id.asc())
        row = self._fetch(query.first)
        if row is None:
            return None
        return self._row_view(*row)

    def ping(self):
        """Check that the database answers a trivial query."""
        try:
            db.session.execute(text('SELECT 1'))
            return True
        except SQLAlchemyError:
            logger.exception('Database ping failed')
            return False

    def close(self, app):
        """Release pooled connections held by the engine."""
        with app.app_context():
            db.session.remove()
            db.engine.dispose()
        logger.info('Database connection closed')

    @staticmethod
    def _joined_query():
        return db.session.query(Contact, EmailLog).outerjoin(
            EmailLog, Contact.id == EmailLog.contact_id
        )

    @staticmethod
    def _commit(record, label):
        try:
            db.session.add(record)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.exception('Error saving %s', label)
            raise StorageError(f'Failed to save {label}') from e

    @staticmethod
    def _fetch(loader):
        try:
            return loader()
        except SQLAlchemyError as e:
            logger.exception('Error reading contacts')
            raise StorageError('Failed to read contacts') from e

    @staticmethod
    def _row_view(contact, log):
        return {
            'id': contact.id,
            'name': contact.name,
            'email': contact.email,
            'company': contact.company,
            'message': contact.message,
            'phone': contact.phone,
            'created_at': _isoformat(contact.created_at),
            'updated_at': _isoformat(contact.updated_at),
            'email_type': log.email_type if log else None,
            'email_status': log.status if log else None,
            'email_sent_at': _isoformat(log.sent_at) if log else None,
            'email_error': log.error_message if log else None,
        }
