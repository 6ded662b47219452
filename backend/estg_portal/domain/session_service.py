"""
Session service
Login, logout, session check and profile edits against the account endpoints.
"""

from ..common.exceptions import ApiAuthError, ApiError, ValidationError
from ..common.validation import sanitize_string, validate_email, validate_password_match
from ..config.logging_config import auth_logger
from ..constants import LOGIN_ENDPOINTS
from ..gateway import forget_api_cookies, get_api_client
from .models import Profile

SESSION_ENDPOINT = '/account/dashboard'
LOGOUT_ENDPOINT = '/account/logout'
PROFILE_ENDPOINT = '/account/updateprofile'


def get_current_session():
    """
    Asks the API who is signed in.

    Returns:
        Profile, or None when the API answers without a user.

    Raises:
        ApiAuthError: no valid session (401)
        ApiError: API unreachable or failing
    """
    payload = get_api_client().get(SESSION_ENDPOINT)
    if not isinstance(payload, dict) or not (payload.get('user') or payload.get('email')):
        return None
    return Profile.from_api(payload)


def peek_session():
    """Session check used by the login pages: any failure simply means "not signed in"."""
    try:
        return get_current_session()
    except ApiError:
        return None


def login_service(kind, email, password):
    """
    Signs in as admin or content creator. The API answers with session cookies,
    which the gateway stores in the Flask session.
    """
    if kind not in LOGIN_ENDPOINTS:
        raise ValueError(f"Unknown login kind: {kind}")
    if not email or not password:
        raise ValidationError("Email and password are required.")

    email = validate_email(email)
    get_api_client().post(LOGIN_ENDPOINTS[kind], json={'email': email, 'password': password})
    auth_logger.info(f"{kind} login succeeded for {email}")


def logout_service():
    """Ends the API session. Local cookies are dropped even when the API call fails."""
    try:
        get_api_client().get(LOGOUT_ENDPOINT)
        return True
    except ApiError as e:
        auth_logger.error(f"Logout error: {e.message}")
        return False
    finally:
        forget_api_cookies()


def update_profile_service(field, value, confirmation=None):
    """
    Sends exactly one profile field to the API.

    Args:
        field: 'email', 'username' or 'password'
        value: new value
        confirmation: password confirmation (password only)

    Raises:
        ValidationError: invalid input, nothing was sent
        ApiError: the API refused the change
    """
    if field == 'email':
        payload = {'email': validate_email(value or '')}
    elif field == 'username':
        payload = {'username': sanitize_string(value or '', min_length=1, max_length=60)}
    elif field == 'password':
        payload = {'password': validate_password_match(value, confirmation)}
    else:
        raise ValidationError(f"Unknown profile field: {field}")

    try:
        get_api_client().put(PROFILE_ENDPOINT, json=payload)
    except ApiAuthError:
        raise
    except ApiError as e:
        auth_logger.error(f"Failed to update {field}: {e.message}")
        raise
    auth_logger.info(f"Profile field '{field}' updated")
