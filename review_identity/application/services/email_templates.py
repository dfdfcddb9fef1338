"""Email bodies for the two verification flows.

Each builder returns (subject, html_body). Values are HTML-escaped.
"""

from html import escape


def registration_code_email(code: str, expire_minutes: int) -> tuple[str, str]:
    """Pre-registration code message."""
    subject = "Your registration code"
    body = f"""
        <h1>Registration code</h1>
        <p>Hello! You are signing up for our review site.</p>
        <p>Use the following code to finish your registration:</p>
        <p style="font-size: 24px; font-weight: bold;">{escape(code)}</p>
        <p>The code is valid for {expire_minutes} minutes. Do not share it with anyone.</p>
        <p>If you did not request this, you can ignore this email.</p>
    """
    return subject, body


def verification_link_email(link: str, expire_hours: int) -> tuple[str, str]:
    """Post-registration verification link message."""
    safe_link = escape(link, quote=True)
    subject = "Please verify your email address"
    body = f"""
        <h1>Email verification</h1>
        <p>Hello! Thanks for signing up.</p>
        <p>Click the link below to verify your email address:</p>
        <p><a href="{safe_link}" style="background-color: #2563eb; color: white; padding: 12px 24px; text-decoration: none; border-radius: 4px;">Verify email</a></p>
        <p>If the button does not work, copy this address into your browser:</p>
        <p>{safe_link}</p>
        <p>This link expires in {expire_hours} hours.</p>
        <p>If you did not create an account, you can ignore this email.</p>
    """
    return subject, body
