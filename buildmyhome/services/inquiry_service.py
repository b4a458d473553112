"""
Inquiry intake.

Stores the inquiry first; the admin notification is best-effort and its
outcome is tracked on the record (``email_status``/``email_error``), so a
mail outage never loses a lead.
"""

from flask import current_app
from flask_mail import Message as MailMessage

from buildmyhome.extensions import db, mail
from buildmyhome.models import Inquiry


def _clean(value):
    return (value or '').strip() or None


def create_inquiry(form, *, source=Inquiry.SOURCE_CONTACT, custom_package=None):
    """Persist a validated inquiry form. Database errors propagate after rollback."""
    inquiry = Inquiry(
        full_name=form.fullName.data.strip(),
        phone_number=form.phoneNumber.data.strip(),
        email=_clean(form.email.data),
        location=_clean(form.location.data),
        requirements=_clean(form.requirements.data),
        custom_package=custom_package,
        source=source,
    )
    try:
        db.session.add(inquiry)
        db.session.commit()
    except Exception:
        db.session.rollback()
        current_app.logger.exception('Failed to store inquiry from %s', source)
        raise

    current_app.logger.info('Inquiry #%s stored (source=%s)', inquiry.id, source)
    notify_admin(inquiry)
    return inquiry


def _render_body(inquiry):
    lines = [
        f"New inquiry #{inquiry.id} ({inquiry.source}):",
        '',
        f"Name: {inquiry.full_name}",
        f"Phone: {inquiry.phone_number}",
        f"Email: {inquiry.email or 'Not provided'}",
        f"Location: {inquiry.location or 'Not provided'}",
        '',
        'Requirements:',
        inquiry.requirements or 'Not provided',
    ]
    package = inquiry.custom_package
    if package:
        lines += [
            '',
            'Custom package:',
            f"  Land area: {package.get('landAreaSqFt')} sq ft",
            f"  Floors: {package.get('floors')}",
            f"  Bedrooms / bathrooms: {package.get('bedrooms')} / {package.get('bathrooms')}",
            f"  House type: {package.get('houseType')}",
            f"  Interior: {package.get('interiorType') or 'Not selected'}",
            f"  Estimated cost: Rs {package.get('estimatedCostRupees', 0):,}",
        ]
    return '\n'.join(lines) + '\n'


def notify_admin(inquiry):
    """Send the admin notice and record the delivery outcome. Never raises."""
    recipient = current_app.config.get('ADMIN_EMAIL')
    sent = False
    error_text = None
    if not recipient:
        error_text = 'ADMIN_EMAIL not configured'
        current_app.logger.warning('Inquiry #%s: %s', inquiry.id, error_text)
    else:
        try:
            msg = MailMessage(
                subject=f"New inquiry from {inquiry.full_name}",
                recipients=[recipient],
                reply_to=inquiry.email,
            )
            msg.body = _render_body(inquiry)
            mail.send(msg)
            sent = True
        except Exception as exc:
            error_text = str(exc)
            current_app.logger.error('Failed to send inquiry email for #%s: %s', inquiry.id, exc)

    inquiry.email_status = Inquiry.EMAIL_SENT if sent else Inquiry.EMAIL_FAILED
    inquiry.email_error = None if sent else (error_text or 'Delivery failed')
    try:
        db.session.commit()
    except Exception as exc:
        db.session.rollback()
        current_app.logger.exception('Failed to update inquiry %s delivery status: %s', inquiry.id, exc)
    return sent
