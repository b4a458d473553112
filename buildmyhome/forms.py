"""
WTForms Form Classes for the BuildMyHome Application

Forms validate inquiry submissions. Flask-WTF reads JSON request bodies
as form data, so the same classes serve the JSON endpoints.
"""

from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField
from wtforms.validators import DataRequired, Email, Length, Optional


class _JSONTextMixin:
    """JSON bodies keep their types; a number or list is a field error, not text."""

    def process_formdata(self, valuelist):
        if valuelist and valuelist[0] is not None and not isinstance(valuelist[0], str):
            self.data = None
            raise ValueError(self.gettext('Must be text'))
        super().process_formdata(valuelist)


class JSONStringField(_JSONTextMixin, StringField):
    pass


class JSONTextAreaField(_JSONTextMixin, TextAreaField):
    pass


class InquiryForm(FlaskForm):
    """Contact inquiry (general contact page)"""

    class Meta:
        # JSON endpoints; the session cookie is SameSite=Lax.
        csrf = False

    fullName = JSONStringField('Full name', validators=[
        DataRequired(message='Name is required'),
        Length(min=2, max=120, message='Name must be at least 2 characters'),
    ])
    phoneNumber = JSONStringField('Phone number', validators=[
        DataRequired(message='Phone number is required'),
        Length(min=10, max=40, message='Phone number is required'),
    ])
    email = JSONStringField('Email', validators=[
        Optional(),
        Email(message='Valid email is required'),
        Length(max=200),
    ])
    location = JSONStringField('Location', validators=[
        Optional(),
        Length(max=200),
    ])
    requirements = JSONTextAreaField('Requirements', validators=[
        Optional(),
        Length(max=4000, message='Requirements must be 4000 characters or less'),
    ])


class BuilderInquiryForm(InquiryForm):
    """Inquiry sent from the custom builder summary; location is mandatory."""

    location = JSONStringField('Location', validators=[
        DataRequired(message='Location is required'),
        Length(min=2, max=200, message='Location is required'),
    ])
