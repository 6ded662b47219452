from flask import Blueprint, abort, flash, g, redirect, request, session, url_for

from ..blueprints.auth import login_required
from ..common.error_handlers import api_error_message, login_url_for_session
from ..common.exceptions import ApiAuthError, ApiError, ValidationError
from ..config.logging_config import app_logger
from ..constants import LOGIN_ADMIN, TAB_PROFILE
from ..domain.session_service import logout_service, update_profile_service

profile_bp = Blueprint('profile', __name__, url_prefix='/profile')

FIELD_LABELS = {
    'email': "Email",
    'username': "Username",
    'password': "Password",
}


@profile_bp.before_request
@login_required
def before_request():
    """Protects every profile route."""
    pass


def _back_to_form(field):
    return redirect(url_for('adminpanel.panel', tab=TAB_PROFILE, edit=field))


@profile_bp.route('/<field>', methods=['POST'])
def update_field(field):
    """
    Saves one profile field. A successful change ends the session: the user
    signs in again with the new details.
    """
    if field not in FIELD_LABELS:
        abort(404)

    try:
        update_profile_service(
            field,
            request.form.get(field),
            confirmation=request.form.get('confirm_password'),
        )
    except ValidationError as e:
        flash(e.message, 'warning')
        return _back_to_form(field)
    except ApiAuthError:
        raise
    except ApiError as e:
        flash(api_error_message(e, f"Failed to update {field}."), 'error')
        return _back_to_form(field)

    app_logger.info(f"{g.profile.username} changed their {field}, signing out")
    kind = session.get('login_kind', LOGIN_ADMIN)
    logout_service()
    session.clear()
    session['login_kind'] = kind
    flash(f"{FIELD_LABELS[field]} updated successfully", 'success')
    return redirect(login_url_for_session())
