from flask import current_app, g, session

from .client import ApiClient, decode_body, extract_message

API_COOKIES_KEY = 'api_cookies'


def _remember_cookies(cookies):
    session[API_COOKIES_KEY] = cookies
    session.modified = True


def get_api_client():
    """
    Returns the ApiClient bound to the current request, creating it on first use.
    The API session cookies kept in the signed Flask session are replayed on every call.
    """
    if 'api_client' not in g:
        g.api_client = ApiClient(
            current_app.config['API_URL'],
            timeout=current_app.config.get('API_TIMEOUT', 10),
            cookies=session.get(API_COOKIES_KEY),
            on_cookies=_remember_cookies,
        )
    return g.api_client


def forget_api_cookies():
    session.pop(API_COOKIES_KEY, None)
    client = g.get('api_client')
    if client is not None:
        client.http.cookies.clear()


def close_api_client(error=None):
    """
    Closes the request's ApiClient.
    Must run on app-context teardown.
    """
    client = g.pop('api_client', None)
    if client is not None:
        client.close()


__all__ = [
    'ApiClient', 'decode_body', 'extract_message',
    'get_api_client', 'forget_api_cookies', 'close_api_client', 'API_COOKIES_KEY',
]
