import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

# Priority: .env.local (development) > .env (production)
try:
    root_path = Path(__file__).resolve().parents[3]
    env_local = root_path / '.env.local'
    env_prod = root_path / '.env'

    if env_local.exists():
        load_dotenv(str(env_local), override=True)
    elif env_prod.exists():
        load_dotenv(str(env_prod), override=True)
    else:
        _dotenv_path = find_dotenv()
        if _dotenv_path:
            load_dotenv(_dotenv_path, override=True)
except OSError:
    pass


def _env_flag(name, default='false'):
    return os.environ.get(name, default).lower() in ('true', '1', 'yes')


class Config:
    """Base application configuration."""

    SECRET_KEY = os.environ.get('SECRET_KEY') or os.environ.get('FLASK_SECRET_KEY')
    if not SECRET_KEY:
        raise ValueError("Neither SECRET_KEY nor FLASK_SECRET_KEY is set.")

    FLASK_ENV = os.environ.get('FLASK_ENV', 'production')
    DEBUG = _env_flag('DEBUG')
    APP_VERSION = os.environ.get('APP_VERSION', '1.0.0')

    # --- REST API ---
    API_URL = (os.environ.get('API_URL') or os.environ.get('VITE_API_URL') or 'http://localhost:5000/api').rstrip('/')
    API_TIMEOUT = float(os.environ.get('API_TIMEOUT', '10'))
    # ----------------

    PUBLIC_PAGE_SIZE = int(os.environ.get('PUBLIC_PAGE_SIZE', '6'))
    PUBLIC_PAGE_STEP = int(os.environ.get('PUBLIC_PAGE_STEP', '3'))
    RELATED_PAGE_SIZE = int(os.environ.get('RELATED_PAGE_SIZE', '3'))
    UPDATE_EXCERPT_LENGTH = int(os.environ.get('UPDATE_EXCERPT_LENGTH', '150'))

    MAX_UPLOAD_SIZE = int(os.environ.get('MAX_UPLOAD_SIZE', str(10 * 1024 * 1024)))
    MAX_CONTENT_LENGTH = MAX_UPLOAD_SIZE + 1024 * 1024

    LOG_DIR = os.environ.get('LOG_DIR')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_ROTATION_ENABLED = _env_flag('LOG_ROTATION_ENABLED', 'true')
    LOG_RETENTION_DAYS = int(os.environ.get('LOG_RETENTION_DAYS', '14'))

    SENTRY_DSN = os.environ.get('SENTRY_DSN')

    RATELIMIT_ENABLED = _env_flag('RATELIMIT_ENABLED', 'true')
    LOGIN_RATE_LIMIT = os.environ.get('LOGIN_RATE_LIMIT', '10 per minute')

    PERMANENT_SESSION_LIFETIME = 60 * 60 * 24

    # On localhost (HTTP) SECURE must be False for the cookie to be sent
    SESSION_COOKIE_SECURE = _env_flag('SESSION_COOKIE_SECURE', 'true') if FLASK_ENV == 'production' else False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    CORS_ALLOWED_ORIGINS = [o.strip() for o in os.environ.get('CORS_ALLOWED_ORIGINS', '').split(',') if o.strip()]
