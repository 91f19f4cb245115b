"""
Email bodies for the password reset flow.

Each builder returns a (subject, html) pair.
"""

from html import escape
from typing import Tuple

_FOOTER = (
    '<hr style="border: none; border-top: 1px solid #ddd; margin: 30px 0;">'
    '<p style="color: #666; font-size: 14px;">Best regards,<br><strong>Job Portal Team</strong></p>'
)


def _wrap(body: str) -> str:
    return (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; '
        'padding: 20px; border: 1px solid #ddd; border-radius: 8px;">'
        f"{body}{_FOOTER}</div>"
    )


def build_reset_link_email(reset_url: str, ttl_minutes: int) -> Tuple[str, str]:
    url = escape(reset_url, quote=True)
    body = (
        '<h2 style="color: #333; text-align: center;">Password Reset Request</h2>'
        "<p>Hello,</p>"
        "<p>You have requested to reset your password for your Job Portal account. "
        "Click the button below to reset it:</p>"
        '<p style="text-align: center; margin: 30px 0;">'
        f'<a href="{url}" style="background-color: #007bff; color: white; padding: 12px 24px; '
        'text-decoration: none; border-radius: 5px; font-weight: bold;">Reset Password</a></p>'
        "<p>If the button doesn't work, copy and paste this link into your browser:</p>"
        f'<p style="word-break: break-all; font-family: monospace;">{url}</p>'
        f"<p><strong>Important:</strong> This link will expire in {ttl_minutes} minutes.</p>"
        "<p>If you didn't request this password reset, please ignore this email and "
        "your password will remain unchanged.</p>"
    )
    return "Password Reset Request - Job Portal", _wrap(body)


def build_reset_confirmation_email() -> Tuple[str, str]:
    body = (
        '<h2 style="color: #28a745; text-align: center;">Password Reset Successful</h2>'
        "<p>Hello,</p>"
        "<p>Your password has been successfully reset for your Job Portal account. "
        "You can now log in with your new password.</p>"
        "<p><strong>Security Notice:</strong> If you didn't perform this action, "
        "please contact our support team immediately.</p>"
    )
    return "Password Reset Successful - Job Portal", _wrap(body)
