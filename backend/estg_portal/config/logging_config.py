import logging
import os
from logging.handlers import TimedRotatingFileHandler

from flask import g

from .log_sanitizer import SensitiveDataFilter


class ContextFilter(logging.Filter):
    """Filter that adds the Flask request context to log records.
    Fills 'user_email' and 'user_role' safely, even outside an app context.
    """

    def filter(self, record):
        try:
            profile = getattr(g, 'profile', None)
        except RuntimeError:
            profile = None

        if profile is not None:
            record.user_email = profile.email or 'unknown'
            record.user_role = profile.role or 'unknown'
        else:
            record.user_email = 'anonymous'
            record.user_role = '-'
        return True


LOGGER_NAMES = ['app', 'auth', 'api', 'content', 'management', 'security']


def setup_logging(app):
    """Configures logging for the application."""

    default_dir = os.path.join(os.path.dirname(__file__), '..', 'logs')
    log_dir = app.config.get('LOG_DIR') or default_dir
    os.makedirs(log_dir, exist_ok=True)

    log_level_str = app.config.get('LOG_LEVEL', 'INFO')
    log_level = getattr(logging, str(log_level_str).upper(), logging.INFO)

    log_format = '%(asctime)s - %(levelname)s - %(user_email)s - %(user_role)s - %(name)s - %(message)s'
    date_format = '%Y-%m-%d %H:%M:%S'
    formatter = logging.Formatter(log_format, date_format)

    rotation_enabled = bool(app.config.get('LOG_ROTATION_ENABLED', True))
    retention_days = int(app.config.get('LOG_RETENTION_DAYS', 14))

    if rotation_enabled:
        file_handler = TimedRotatingFileHandler(
            os.path.join(log_dir, 'app.log'), when='midnight', backupCount=retention_days, encoding='utf-8'
        )
        error_handler = TimedRotatingFileHandler(
            os.path.join(log_dir, 'errors.log'), when='midnight', backupCount=retention_days, encoding='utf-8'
        )
    else:
        file_handler = logging.FileHandler(os.path.join(log_dir, 'app.log'), encoding='utf-8')
        error_handler = logging.FileHandler(os.path.join(log_dir, 'errors.log'), encoding='utf-8')
    error_handler.setLevel(logging.ERROR)

    console_handler = logging.StreamHandler()

    handlers = [file_handler, error_handler, console_handler]
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(ContextFilter())
        handler.addFilter(SensitiveDataFilter())

    loggers = [app.logger] + [logging.getLogger(name) for name in LOGGER_NAMES]
    for named_logger in loggers:
        named_logger.setLevel(log_level)
        # create_app may run more than once in the same process (tests)
        for old in list(named_logger.handlers):
            named_logger.removeHandler(old)
            old.close()
        for handler in handlers:
            named_logger.addHandler(handler)

    app.logger.info('Logging configured')


def get_logger(name):
    """Returns the logger with the given name."""
    return logging.getLogger(name)


app_logger = get_logger('app')
auth_logger = get_logger('auth')
api_logger = get_logger('api')
content_logger = get_logger('content')
management_logger = get_logger('management')
security_logger = get_logger('security')
