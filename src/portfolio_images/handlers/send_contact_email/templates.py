"""HTML bodies for contact emails. All user input is escaped."""

from html import escape

from .models import ContactInquiry

_ROW = (
    '<div style="margin-bottom: 15px;">'
    '<strong style="color: #2d5016;">{label}:</strong>'
    '<span style="margin-left: 10px; color: #333;">{value}</span>'
    "</div>"
)


def _row(label: str, value: str | None) -> str:
    if not value:
        return ""
    return _ROW.format(label=label, value=escape(value))


def inquiry_subject(inquiry: ContactInquiry) -> str:
    return f"New Photography Session Inquiry from {inquiry.name}"


def render_inquiry(inquiry: ContactInquiry) -> str:
    """Body of the email sent to the studio inbox."""
    return (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">'
        '<h1 style="color: #2d5016;">New Session Inquiry</h1>'
        '<h2 style="color: #2d5016;">Contact Details</h2>'
        f"{_row('Name', inquiry.name)}"
        f"{_row('Email', inquiry.email)}"
        f"{_row('Phone', inquiry.phone)}"
        f"{_row('Session Type', inquiry.session_type)}"
        '<div style="margin-top: 25px;"><strong style="color: #2d5016;">Message:</strong>'
        '<div style="background: #f8f9fa; padding: 15px; border-left: 4px solid #c5964f;">'
        f"{escape(inquiry.message or '')}"
        "</div></div>"
        f"<p>Reply to this email to respond directly to {escape(inquiry.name or '')}.</p>"
        "</div>"
    )


CONFIRMATION_SUBJECT = "Thank you for your photography inquiry!"


def render_confirmation(inquiry: ContactInquiry, *, studio_name: str | None = None) -> str:
    """Body of the confirmation email sent back to the client."""
    contact = escape(inquiry.email or "")
    if inquiry.phone:
        contact += f" | {escape(inquiry.phone)}"

    return (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">'
        f'<h1 style="color: #2d5016;">{escape(studio_name or "Photography")}</h1>'
        f'<h2 style="color: #2d5016;">Thank You, {escape(inquiry.name or "")}!</h2>'
        '<p style="color: #333; line-height: 1.6;">'
        "I've received your inquiry and will get back to you within 24-48 hours to discuss "
        "your session details, available dates and package options."
        "</p>"
        '<div style="background: #f8f9fa; padding: 20px; border-left: 4px solid #c5964f;">'
        '<h3 style="color: #2d5016;">Your Inquiry Summary:</h3>'
        f"<p><strong>Session Type:</strong> {escape(inquiry.session_type or 'Not specified')}</p>"
        f"<p><strong>Contact:</strong> {contact}</p>"
        "</div>"
        "</div>"
    )
