"""Password reset e-mail bodies.

Display strings are HTML-escaped in the HTML variant; the reset URL is
inserted verbatim in both variants so the link text matches the target. URLs
carrying quote or angle-bracket characters are rejected.
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from markupsafe import escape

from ..core.exceptions import ValidationError

_UNSAFE_URL_CHARS = frozenset('"<>')


def require_safe_url(url: str) -> str:
    if not url or _UNSAFE_URL_CHARS.intersection(url):
        raise ValidationError("Reset URL is empty or contains characters not allowed in a link")
    return url


def render_reset_html(
    *,
    first_name: str,
    reset_url: str,
    system_name: str,
    school_name: str,
    year: Optional[int] = None,
) -> str:
    reset_url = require_safe_url(reset_url)
    year = year or date.today().year
    first_name = escape(first_name)
    system_name = escape(system_name)
    school_name = escape(school_name)
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Reset Your Password</title>
</head>
<body style="margin: 0; padding: 0; font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; background-color: #f4f4f5;">
  <table role="presentation" style="width: 100%; border-collapse: collapse;">
    <tr>
      <td align="center" style="padding: 40px 0;">
        <table role="presentation" style="width: 100%; max-width: 600px; border-collapse: collapse; background-color: #ffffff; border-radius: 12px;">
          <tr>
            <td style="padding: 40px 40px 20px; text-align: center; background-color: #4f46e5; border-radius: 12px 12px 0 0;">
              <h1 style="margin: 0; color: #ffffff; font-size: 24px; font-weight: 600;">Password Reset Request</h1>
              <p style="margin: 8px 0 0; color: #e0e7ff; font-size: 14px;">{system_name} &bull; {school_name}</p>
            </td>
          </tr>
          <tr>
            <td style="padding: 40px;">
              <p style="margin: 0 0 20px; color: #374151; font-size: 16px; line-height: 1.6;">Hi <strong>{first_name}</strong>,</p>
              <p style="margin: 0 0 20px; color: #374151; font-size: 16px; line-height: 1.6;">
                We received a request to reset your password. Click the button below to create a new password:
              </p>
              <table role="presentation" style="width: 100%; border-collapse: collapse;">
                <tr>
                  <td align="center" style="padding: 20px 0;">
                    <a href="{reset_url}" style="display: inline-block; padding: 16px 32px; background-color: #4f46e5; color: #ffffff; text-decoration: none; font-size: 16px; font-weight: 600; border-radius: 8px;">
                      Reset My Password
                    </a>
                  </td>
                </tr>
              </table>
              <div style="margin: 30px 0; padding: 20px; background-color: #fef3c7; border-radius: 8px; border-left: 4px solid #f59e0b;">
                <p style="margin: 0; color: #92400e; font-size: 14px; line-height: 1.5;">
                  <strong>This link expires in 1 hour</strong> for your security.<br>
                  If you didn't request this reset, you can safely ignore this email.
                </p>
              </div>
              <p style="margin: 20px 0 0; color: #6b7280; font-size: 14px; line-height: 1.6;">
                If the button doesn't work, copy and paste this link into your browser:
              </p>
              <p style="margin: 8px 0 0; padding: 12px; background-color: #f4f4f5; border-radius: 6px; word-break: break-all;">
                <a href="{reset_url}" style="color: #4f46e5; font-size: 12px; text-decoration: none;">{reset_url}</a>
              </p>
            </td>
          </tr>
          <tr>
            <td style="padding: 30px 40px; background-color: #f9fafb; border-radius: 0 0 12px 12px; border-top: 1px solid #e5e7eb;">
              <p style="margin: 0; color: #9ca3af; font-size: 12px; text-align: center; line-height: 1.5;">
                This is an automated message from {system_name}.<br>
                Please do not reply to this email.
              </p>
              <p style="margin: 16px 0 0; color: #9ca3af; font-size: 12px; text-align: center;">
                &copy; {year} {school_name}. All rights reserved.
              </p>
            </td>
          </tr>
        </table>
      </td>
    </tr>
  </table>
</body>
</html>
"""


def render_reset_text(*, first_name: str, reset_url: str, system_name: str) -> str:
    reset_url = require_safe_url(reset_url)
    return f"""
Hi {first_name},

We received a request to reset your password for {system_name}.

Click the link below to reset your password:
{reset_url}

This link expires in 1 hour for your security.

If you didn't request this password reset, you can safely ignore this email.

---
This is an automated message. Please do not reply to this email.
""".strip()
