from flask_compress import Compress
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_wtf.csrf import CSRFProtect

csrf = CSRFProtect()
compress = Compress()

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["100 per minute"],
    storage_uri="memory://",
    strategy="fixed-window",
    headers_enabled=True,
)


def init_limiter(app):
    """
    Initializes Flask-Limiter with a moderate global limit.

    Login routes carry a stricter limit of their own (LOGIN_RATE_LIMIT).
    RATELIMIT_ENABLED=False turns every limit off (tests, local development).
    """
    limiter.init_app(app)
    app.logger.info(
        f"Limiter initialized (enabled={app.config.get('RATELIMIT_ENABLED', True)}, global limit: 100 req/min)"
    )


def init_compress(app):
    app.config.setdefault('COMPRESS_MIMETYPES', [
        'text/html', 'text/css', 'application/json', 'application/javascript',
    ])
    app.config.setdefault('COMPRESS_LEVEL', 6)
    app.config.setdefault('COMPRESS_MIN_SIZE', 500)
    compress.init_app(app)
