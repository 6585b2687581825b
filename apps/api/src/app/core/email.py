"""
Email Service using Resend

Transactional emails for the screening and enrollment flow.
Sending is best-effort: failures are logged and reported as False,
never raised to the caller.
"""

import asyncio
import logging
from html import escape

import resend

from app.core.config import settings

logger = logging.getLogger(__name__)

# Initialize Resend with API key
resend.api_key = settings.resend_api_key

_STYLES = """
        <style>
            body {{ font-family: system-ui, -apple-system, sans-serif; line-height: 1.6; color: #1f2937; }}
            .container {{ max-width: 600px; margin: 0 auto; padding: 40px 20px; }}
            .header {{ color: #1a365d; margin-bottom: 24px; }}
            .info-box {{ background-color: #f3f4f6; padding: 16px; border-radius: 8px; margin: 16px 0; }}
            .footer {{ margin-top: 40px; padding-top: 20px; border-top: 1px solid #e5e7eb; color: #6b7280; font-size: 14px; }}
        </style>
"""


async def send_email(
    to_email: str,
    subject: str,
    html_content: str,
    cc: list[str] | None = None,
) -> bool:
    """
    Send an email using Resend.

    Args:
        to_email: Recipient email address
        subject: Email subject line
        html_content: HTML content of the email
        cc: Optional carbon-copy recipients

    Returns:
        True if email was sent successfully
    """
    if not resend.api_key:
        logger.warning("RESEND_API_KEY not set - logging email instead of sending")
        logger.info(f"EMAIL TO: {to_email} | CC: {cc or []} | SUBJECT: {subject}")
        return True

    try:
        params: resend.Emails.SendParams = {
            "from": settings.email_from,
            "to": [to_email],
            "subject": subject,
            "html": html_content,
        }
        if cc:
            params["cc"] = cc

        # Run sync Resend call in thread pool to avoid blocking event loop
        email = await asyncio.to_thread(resend.Emails.send, params)
        logger.info(f"Email sent successfully to {to_email}, id: {email['id']}")
        return True
    except Exception as e:
        logger.error(f"Failed to send email to {to_email}: {e}")
        return False


async def send_screening_received(
    to_email: str,
    candidate_name: str,
    position: str,
    enrollment_id: str,
    resume_link: str,
) -> bool:
    """Confirm a screening submission to the candidate (cc operations)."""
    # Escape user inputs to prevent XSS
    safe_name = escape(candidate_name)
    safe_position = escape(position)
    safe_enrollment_id = escape(enrollment_id)
    safe_resume_link = escape(resume_link, quote=True)
    organization = escape(settings.organization_name)

    html_content = f"""
    <!DOCTYPE html>
    <html>
    <head>{_STYLES.format()}</head>
    <body>
        <div class="container">
            <h1 class="header">Screening Submitted</h1>

            <p>Hi {safe_name},</p>

            <p>Your screening for the <strong>{safe_position}</strong> internship has been received.</p>

            <div class="info-box">
                <p>Your Enrollment ID: <strong>{safe_enrollment_id}</strong></p>
                <p>Resume: <a href="{safe_resume_link}" target="_blank">View Resume</a></p>
            </div>

            <p>Our HR team will review your submission and contact you if you're selected.</p>

            <div class="footer">
                <p>Regards,<br><strong>{organization} Team</strong></p>
            </div>
        </div>
    </body>
    </html>
    """
    return await send_email(
        to_email=to_email,
        subject=f"Screening Submitted - {settings.organization_name}",
        html_content=html_content,
        cc=settings.screening_cc_emails,
    )


async def send_payment_received(
    to_email: str,
    candidate_name: str,
    position: str,
    enrollment_id: str,
    payment_id: str,
) -> bool:
    """Confirm a verified payment to the candidate (cc HR)."""
    safe_name = escape(candidate_name)
    safe_position = escape(position)
    safe_enrollment_id = escape(enrollment_id)
    safe_payment_id = escape(payment_id)
    organization = escape(settings.organization_name)

    html_content = f"""
    <!DOCTYPE html>
    <html>
    <head>{_STYLES.format()}</head>
    <body>
        <div class="container">
            <h1 class="header">Payment Received</h1>

            <p>Hi {safe_name},</p>

            <p>Your payment has been successfully received for the <strong>{safe_position}</strong> internship.</p>

            <div class="info-box">
                <p>Enrollment ID: <strong>{safe_enrollment_id}</strong></p>
                <p>Payment ID: <strong>{safe_payment_id}</strong></p>
            </div>

            <p>Our HR team will reach out to you shortly with the next steps.</p>

            <div class="footer">
                <p>Regards,<br><strong>{organization} Team</strong></p>
            </div>
        </div>
    </body>
    </html>
    """
    return await send_email(
        to_email=to_email,
        subject=f"Payment Received - {settings.organization_name} Internship",
        html_content=html_content,
        cc=settings.payment_cc_emails,
    )
