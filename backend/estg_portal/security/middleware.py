from flask import request

# login forms and everything behind the session gate
NO_STORE_PREFIXES = ('/admin', '/user', '/adminpanel', '/createevent', '/createupdate', '/update/', '/profile')

# event images and update attachments are served by the API host
CONTENT_SECURITY_POLICY = "; ".join([
    "default-src 'self'",
    "script-src 'self'",
    "style-src 'self' 'unsafe-inline'",
    "img-src 'self' data: https: http:",
    "frame-ancestors 'none'",
    "base-uri 'self'",
    "form-action 'self'",
])

SECURITY_HEADERS = {
    'Content-Security-Policy': CONTENT_SECURITY_POLICY,
    'X-Content-Type-Options': 'nosniff',
    'X-Frame-Options': 'DENY',
    'Referrer-Policy': 'strict-origin-when-cross-origin',
    'Permissions-Policy': 'geolocation=(), microphone=(), camera=()',
}


def init_security_headers(app):
    @app.after_request
    def set_security_headers(response):
        response.headers.update(SECURITY_HEADERS)
        if app.config.get('SESSION_COOKIE_SECURE'):
            response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        if request.path.startswith(NO_STORE_PREFIXES):
            response.headers['Cache-Control'] = 'no-store, private'
            response.headers['Pragma'] = 'no-cache'
        return response


def configure_cors(app):
    """Read-only cross-origin access for the public pages, limited to CORS_ALLOWED_ORIGINS."""
    allowed_origins = app.config.get('CORS_ALLOWED_ORIGINS') or []
    if not allowed_origins:
        return

    @app.after_request
    def add_cors_headers(response):
        origin = request.headers.get('Origin')
        if origin in allowed_origins:
            response.headers['Access-Control-Allow-Origin'] = origin
            response.headers['Access-Control-Allow-Methods'] = 'GET'
            response.headers['Vary'] = 'Origin'
        return response

    app.logger.info(f"CORS enabled for {', '.join(allowed_origins)}")
