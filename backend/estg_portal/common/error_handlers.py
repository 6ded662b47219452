"""
Error handling for views: API failures become flashed messages and redirects.
"""

import functools

from flask import current_app, flash, jsonify, redirect, render_template, request, session, url_for
from werkzeug.exceptions import HTTPException

from ..config.logging_config import api_logger, security_logger
from ..config.sentry_config import capture_exception
from ..constants import LOGIN_ADMIN, MSG_UNEXPECTED
from .exceptions import AccessDeniedError, ApiAuthError, ApiError, ValidationError


def login_url_for_session():
    """The login page matching the last login kind (admin by default)."""
    if session.get('login_kind') == 'creator':
        return url_for('auth.creator_login')
    return url_for('auth.admin_login')


def api_error_message(error, fallback):
    """Message shown to the user: the API's own message when it sent one, else `fallback`."""
    server_message = getattr(error, 'server_message', None)
    return server_message or fallback


def handle_view_errors(fallback_endpoint='adminpanel.panel', message=None, keep_search=False, **fallback_args):
    """
    Decorator for HTML views that call the API.
    On failure the user lands on `fallback_endpoint` (built with `fallback_args`,
    plus the submitted `q` search term when `keep_search` is set).

    - ValidationError: warning flash, back to the fallback page
    - ApiError (except 401, left to the session gate): error flash, back to the fallback page
    - HTTP errors raised with abort() pass through
    - anything else: logged, generic error flash
    """
    def fallback():
        args = dict(fallback_args)
        search = (request.values.get('q') or '').strip() if keep_search else ''
        if search:
            args['q'] = search
        return redirect(url_for(fallback_endpoint, **args))

    def decorator(f):
        @functools.wraps(f)
        def decorated_function(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except ValidationError as e:
                flash(e.message, 'warning')
                return fallback()
            except (ApiAuthError, HTTPException):
                raise
            except ApiError as e:
                api_logger.error(f"API error in {f.__name__}: {e.message} {e.details}")
                flash(message or e.message, 'error')
                return fallback()
            except Exception as e:
                api_logger.error(f"Error in view {f.__name__}: {e}", exc_info=True)
                capture_exception(e, {"view": f.__name__, "path": request.path})
                if current_app.config.get('DEBUG'):
                    raise
                flash(MSG_UNEXPECTED, 'error')
                return fallback()
        return decorated_function
    return decorator


def _wants_json():
    return request.path.startswith('/health') or request.accept_mimetypes.best == 'application/json'


def init_error_handlers(app):

    @app.errorhandler(ApiAuthError)
    def api_session_expired(e):
        security_logger.info(f"API session rejected on {request.path}")
        login_url = login_url_for_session()
        kind = session.get('login_kind', LOGIN_ADMIN)
        session.clear()
        session['login_kind'] = kind
        if _wants_json():
            return jsonify({'ok': False, 'error': e.message}), 401
        return redirect(login_url)

    @app.errorhandler(AccessDeniedError)
    def access_denied(e):
        security_logger.warning(f"Access denied for role {e.details.get('role')} on {e.details.get('path')}")
        flash(e.message, 'error')
        return redirect(url_for('adminpanel.panel'))

    @app.errorhandler(404)
    def page_not_found(e):
        if _wants_json():
            return jsonify({'ok': False, 'error': 'Resource not found'}), 404
        return render_template('404.html'), 404

    @app.errorhandler(429)
    def ratelimit_handler(e):
        if _wants_json():
            return jsonify({'ok': False, 'error': 'Too many requests. Try again later.'}), 429
        return render_template('error.html', error="Too many requests. Please wait a moment."), 429

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Error 500: {e}", exc_info=True)
        if _wants_json():
            return jsonify({'ok': False, 'error': 'Internal server error'}), 500
        return render_template('error.html', error="Something went wrong on our side."), 500
