"""Contact submission form."""

from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField
from wtforms.validators import InputRequired, Optional, ValidationError


class TextValue:
    """Reject submitted values that are not text (JSON objects, booleans, numbers)."""

    def __init__(self, message='Must be text'):
        self.message = message

    def __call__(self, form, field):
        if not field.raw_data:
            return
        value = field.raw_data[0]
        if value is not None and not isinstance(value, str):
            raise ValidationError(self.message)


class ContactForm(FlaskForm):
    """Contact form fields. Validates JSON or form-encoded payloads."""

    class Meta:
        csrf = False

    name = StringField('Name', validators=[
        InputRequired(message='Name is required'),
        TextValue()
    ])
    email = StringField('Email', validators=[
        InputRequired(message='Email is required'),
        TextValue()
    ])
    company = StringField('Company', validators=[Optional(), TextValue()])
    phone = StringField('Phone', validators=[Optional(), TextValue()])
    message = TextAreaField('Message', validators=[
        InputRequired(message='Message is required'),
        TextValue()
    ])

    def contact_fields(self):
        """Submitted values keyed by column name."""
        return {
            'name': self.name.data,
            'email': self.email.data,
            'company': self.company.data or '',
            'phone': self.phone.data or '',
            'message': self.message.data,
        }
