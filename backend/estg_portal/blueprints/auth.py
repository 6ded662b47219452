from functools import wraps

from flask import Blueprint, current_app, flash, g, redirect, render_template, request, session, url_for

from ..common.error_handlers import login_url_for_session
from ..common.exceptions import AccessDeniedError, ApiAuthError, ApiResponseError, ApiUnavailableError, ValidationError
from ..config.logging_config import auth_logger, security_logger
from ..constants import LOGIN_ADMIN, LOGIN_CREATOR, ROLES_MANAGE_CREATORS, ROLES_WITH_PANEL
from ..core.extensions import limiter
from ..domain.session_service import get_current_session, login_service, logout_service, peek_session
from ..gateway import API_COOKIES_KEY

auth_bp = Blueprint('auth', __name__)

LOGIN_SUCCESS = "Login successful!"
LOGIN_INVALID = "Invalid credentials. Please try again."
ADMIN_LOGIN_FAILED = "Login failed. Check your credentials."


def _login_rate_limit():
    return current_app.config.get('LOGIN_RATE_LIMIT', '10 per minute')


def login_required(f):
    """
    Session gate: asks the API who is signed in before the view runs.

    No API session -> login page. Role outside the panel -> login page with a flash.
    On success the profile is available as g.profile.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not session.get(API_COOKIES_KEY):
            auth_logger.info(f"Login required: anonymous access to {request.path}")
            return redirect(login_url_for_session())

        try:
            profile = get_current_session()
        except ApiUnavailableError as e:
            flash(e.message, 'error')
            return redirect(url_for('public.index'))
        except ApiResponseError as e:
            auth_logger.error(f"Session check failed: {e.message}")
            flash(e.message, 'error')
            return redirect(url_for('public.index'))

        if profile is None:
            return redirect(login_url_for_session())

        if profile.role not in ROLES_WITH_PANEL:
            security_logger.warning(f"Role {profile.role} refused at the panel gate ({request.path})")
            flash("Your account cannot use the admin panel.", 'error')
            logout_service()
            return redirect(login_url_for_session())

        g.profile = profile
        return f(*args, **kwargs)
    return decorated_function


def role_required(roles):
    """Restricts a view to the given roles. Must sit below login_required."""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            profile = g.get('profile')
            role = profile.role if profile else None
            if role not in roles:
                raise AccessDeniedError(role, request.path)
            return f(*args, **kwargs)
        return decorated_function
    return decorator


def admin_required(f):
    return role_required(ROLES_MANAGE_CREATORS)(f)


def _login_view(kind, template_title):
    if request.method == 'GET':
        profile = peek_session() if session.get(API_COOKIES_KEY) else None
        if profile is not None:
            # the admin login only skips ahead for an Admin session
            if kind == LOGIN_CREATOR or profile.is_admin:
                return redirect(url_for('adminpanel.panel'))
        return render_template('auth/login.html', kind=kind, title=template_title, email='')

    email = (request.form.get('email') or '').strip()
    password = request.form.get('password') or ''

    try:
        login_service(kind, email, password)
    except ValidationError as e:
        flash(e.message, 'warning')
        return render_template('auth/login.html', kind=kind, title=template_title, email=email), 400
    except ApiAuthError:
        auth_logger.warning(f"{kind} login rejected for {email}")
        flash(LOGIN_INVALID, 'error')
        return render_template('auth/login.html', kind=kind, title=template_title, email=email), 401
    except ApiUnavailableError as e:
        flash(e.message, 'error')
        return render_template('auth/login.html', kind=kind, title=template_title, email=email), 503
    except ApiResponseError as e:
        if kind == LOGIN_ADMIN:
            flash(e.server_message or ADMIN_LOGIN_FAILED, 'error')
        else:
            flash(f"Error: {e.message}", 'error')
        return render_template('auth/login.html', kind=kind, title=template_title, email=email), 400

    session['login_kind'] = kind
    session.permanent = True
    flash(LOGIN_SUCCESS, 'success')
    return redirect(url_for('adminpanel.panel'))


@auth_bp.route('/admin', methods=['GET', 'POST'])
@limiter.limit(_login_rate_limit, methods=['POST'])
def admin_login():
    return _login_view(LOGIN_ADMIN, "Admin Login")


@auth_bp.route('/user', methods=['GET', 'POST'])
@limiter.limit(_login_rate_limit, methods=['POST'])
def creator_login():
    return _login_view(LOGIN_CREATOR, "Content Creator Login")


@auth_bp.route('/logout')
def logout():
    """Ends the API session and returns to the login page of the same kind."""
    kind = session.get('login_kind', LOGIN_ADMIN)
    if session.get(API_COOKIES_KEY):
        logout_service()
    session.clear()
    session['login_kind'] = kind
    flash("You have been logged out.", 'info')
    return redirect(login_url_for_session())
