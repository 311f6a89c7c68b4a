import logging

from django.conf import settings
from django.utils import timezone
from django.utils.html import escape
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail


logger = logging.getLogger(__name__)


def build_email_html(title, greeting, message, footer=""):
    """Styled HTML shell shared by every outgoing email."""
    greeting_html = f"<p>Dear <strong>{escape(greeting)}</strong>,</p>" if greeting else ""
    html = f"""
<div style="font-family:Arial, sans-serif; background-color:#f4f6f8; padding:20px;">
  <div style="max-width:600px; margin:auto; background-color:#ffffff; border-radius:8px; overflow:hidden; border:1px solid #ddd;">
    <div style="background-color:#2563eb; color:#fff; padding:15px; text-align:center; font-size:20px;">{settings.SITE_NAME}</div>
    <div style="padding:20px; color:#333;">
      <h2 style="color:#2563eb;">{title}</h2>
      {greeting_html}
      <p>{message}</p>
      <p>{footer}</p>
    </div>
    <div style="background-color:#2563eb; color:#fff; text-align:center; padding:10px; font-size:12px;">
      &copy; {timezone.now().year} {settings.SITE_NAME}. All rights reserved.
    </div>
  </div>
</div>
"""
    return html


def _details_block(heading, rows):
    # values come from public forms
    lines = "".join(f"<strong>{label}:</strong> {escape(value)}<br>" for label, value in rows)
    return (
        f'<div style="background-color:#f3f4f6; padding:15px; border-radius:5px; margin:20px 0;">'
        f'<h3 style="margin-top:0;">{heading}</h3>{lines}</div>'
    )


class EmailNotifier:
    """Sends registration and contact emails through SendGrid.

    Sending never raises: failures are logged and reported as ``False`` so a
    registration or contact message is stored whether or not mail goes out.
    """

    def __init__(self, api_key=None, from_email=None, admin_email=None):
        self.api_key = settings.SENDGRID_API_KEY if api_key is None else api_key
        self.from_email = from_email or settings.DEFAULT_FROM_EMAIL
        self.admin_email = admin_email or settings.ADMIN_EMAIL

        if not self.api_key:
            logger.warning("SENDGRID_API_KEY is not set - email notifications disabled")
            self.enabled = False
        else:
            self.enabled = True

    def send_email(self, subject, html_content, to_email):
        if not self.enabled:
            logger.info(f"Email disabled - skipping '{subject}' to {to_email}")
            return False

        email = Mail(
            from_email=self.from_email,
            to_emails=to_email,
            subject=subject,
            html_content=html_content,
        )
        try:
            response = SendGridAPIClient(self.api_key).send(email)
            logger.info(f"Email '{subject}' sent to {to_email} (status {response.status_code})")
            return True
        except Exception as e:
            logger.error(f"Error sending email '{subject}' to {to_email}: {e}")
            return False

    def send_admin_registration_notification(self, registration, course=None):
        """Tell the admin inbox about a new registration.

        ``course`` may be None when the registration points at an unknown
        course id; the raw id is shown instead.
        """
        course_label = course.title if course is not None else registration.course_id
        registered_at = timezone.localtime(registration.registration_date).strftime("%d %B %Y, %I:%M %p")

        message = (
            f"A new registration has been received for the <b>{escape(course_label)}</b> course."
            + _details_block("Registration Details:", [
                ("Name", registration.full_name),
                ("Email", registration.email),
                ("Phone", registration.phone or "Not provided"),
                ("Country", registration.country or "N/A"),
                ("Experience Level", registration.experience_level or "N/A"),
                ("Course", course_label),
                ("Goals", registration.goals or "Not provided"),
                ("Newsletter", "Yes" if registration.newsletter else "No"),
                ("Registration ID", registration.id),
                ("Date", registered_at),
            ])
        )
        html = build_email_html(
            title="New Registration Received",
            greeting=None,
            message=message,
            footer="Please review this registration in the admin dashboard.",
        )
        return self.send_email("New Course Registration", html, self.admin_email)

    def send_registration_confirmation(self, registration, course):
        message = (
            f"Thank you for registering for our <b>{escape(course.title)}</b> course. "
            f"Your registration has been confirmed."
            + _details_block("Course Details:", [
                ("Course", course.title),
                ("Level", course.level or "N/A"),
                ("Duration", course.duration or "N/A"),
                ("Registration ID", registration.id),
            ])
        )
        html = build_email_html(
            title="Registration Confirmed!",
            greeting=registration.full_name,
            message=message,
            footer="We're excited to have you join us! If you have any questions before the course "
                   "begins, please don't hesitate to contact us.",
        )
        return self.send_email(f"Registration Confirmed - {settings.SITE_NAME}", html, registration.email)

    def send_contact_message_notification(self, contact_message):
        received_at = timezone.localtime(contact_message.created_at).strftime("%d %B %Y, %I:%M %p")
        message = _details_block("Message Details:", [
            ("Name", contact_message.name),
            ("Email", contact_message.email),
            ("Subject", contact_message.subject),
            ("Received at", received_at),
        ]) + f"<p>{escape(contact_message.message)}</p>"
        html = build_email_html(
            title="New Contact Message Received",
            greeting=None,
            message=message,
        )
        return self.send_email(f"New Contact Message: {contact_message.subject}", html, self.admin_email)
