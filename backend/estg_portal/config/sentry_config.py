"""
Sentry configuration for production error monitoring.

Sentry automatically captures:
- Unhandled exceptions
- Errors logged at ERROR level (breadcrumbs for the rest)
- A sample of request traces
"""

import sentry_sdk
from sentry_sdk.integrations.flask import FlaskIntegration
from sentry_sdk.integrations.logging import LoggingIntegration


def init_sentry(app):
    """
    Initializes Sentry when SENTRY_DSN is configured.

    Args:
        app: Flask app instance
    """
    sentry_dsn = app.config.get('SENTRY_DSN')

    if not sentry_dsn:
        app.logger.info("Sentry not configured (SENTRY_DSN not set)")
        return False

    environment = app.config.get('FLASK_ENV', 'production')

    sentry_sdk.init(
        dsn=sentry_dsn,
        integrations=[
            FlaskIntegration(),
            LoggingIntegration(level=None, event_level='ERROR'),
        ],
        traces_sample_rate=0.1,
        environment=environment,
        release=app.config.get('APP_VERSION', 'unknown'),
        send_default_pii=False,
        max_breadcrumbs=50,
        before_send=before_send_filter,
    )

    app.logger.info(f"Sentry initialized: environment={environment}")
    return True


def before_send_filter(event, hint):
    """
    Drops noise and strips credentials before an event leaves the process.

    Returns:
        the event, or None to drop it
    """
    exception = (event.get('exception') or {}).get('values') or [{}]
    if exception[0].get('type') in ('NotFound', 'ApiAuthError'):
        return None

    if 'request' in event:
        headers = event['request'].get('headers', {})
        for header in ('Authorization', 'Cookie'):
            if header in headers:
                headers[header] = '[Filtered]'
        data = event['request'].get('data')
        if isinstance(data, dict):
            for field in ('password', 'confirm_password', 'new_password'):
                if field in data:
                    data[field] = '[Filtered]'

    try:
        from flask import g
        profile = getattr(g, 'profile', None)
        if profile is not None:
            event.setdefault('user', {})['username'] = profile.username
    except RuntimeError:
        pass

    return event


def capture_exception(exception, context=None):
    """Sends an exception to Sentry manually, with optional extra context."""
    with sentry_sdk.new_scope() as scope:
        for key, value in (context or {}).items():
            scope.set_extra(key, value)
        sentry_sdk.capture_exception(exception)
