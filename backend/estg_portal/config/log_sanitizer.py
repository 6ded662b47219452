"""
Masks credentials and personal data before a record reaches any handler.

The portal logs login attempts, profile edits and every failed API call, so
messages routinely carry e-mails, passwords and the API session cookie.
"""

import logging
import os
import re

EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

# (pattern, replacement), applied in order; JWTs go first so the
# credential patterns below never see a token body
REDACTIONS = [
    (re.compile(r"eyJ[A-Za-z0-9_-]{17,}\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+"), "eyJ***[JWT_REDACTED]"),
    (re.compile(r"(Bearer\s+)[A-Za-z0-9_.\-]+", re.IGNORECASE), r"\1***[TOKEN_REDACTED]"),
    (re.compile(r"((?:Set-)?Cookie['\"]?\s*[:=]\s*['\"]?)[^'\"\n]+", re.IGNORECASE), r"\1***"),
    (re.compile(r"(['\"](?:password|confirm_password|backupCode|backupCodeDecimal)['\"]\s*:\s*['\"]?)[^'\",}]*",
                re.IGNORECASE), r"\1***"),
    (re.compile(r"((?:password|passwd|secret|backup_code)\s*[=:]\s*)[^\s'\",}]+", re.IGNORECASE), r"\1***"),
]

SECRET_ENV_VARS = ("SECRET_KEY", "FLASK_SECRET_KEY", "SENTRY_DSN")


def mask_email(match):
    local, domain = match.group(0).rsplit("@", 1)
    return f"{local[0]}***@{domain}" if len(local) > 1 else f"*@{domain}"


class SensitiveDataFilter(logging.Filter):
    """Rewrites `msg`, string `args` and cached tracebacks in place; never drops a record."""

    def __init__(self, name="", mask_emails=True):
        super().__init__(name)
        self.mask_emails = mask_emails
        self.secrets = []
        for var in SECRET_ENV_VARS:
            value = os.getenv(var) or ""
            if len(value) > 6:
                self.secrets.append((value, f"{value[:2]}***[{var}]"))

    def sanitize(self, text):
        text = str(text)
        for value, masked in self.secrets:
            text = text.replace(value, masked)
        for pattern, replacement in REDACTIONS:
            text = pattern.sub(replacement, text)
        if self.mask_emails:
            text = EMAIL_RE.sub(mask_email, text)
        return text

    def _clean(self, value):
        return self.sanitize(value) if isinstance(value, str) else value

    def filter(self, record):
        if isinstance(record.msg, str) and record.msg:
            record.msg = self.sanitize(record.msg)
        if isinstance(record.args, dict):
            record.args = {key: self._clean(value) for key, value in record.args.items()}
        elif isinstance(record.args, tuple):
            record.args = tuple(self._clean(arg) for arg in record.args)
        if record.exc_text:
            record.exc_text = self.sanitize(record.exc_text)
        return True
