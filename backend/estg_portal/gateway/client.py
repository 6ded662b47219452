"""
HTTP client for the ESTG-TSS REST API.

One ApiClient wraps one requests.Session. The Flask layer (gateway/__init__.py)
creates a client per incoming request and closes it on teardown, so no API call
outlives the page request that issued it.
"""

from typing import Any, Callable, Optional

import requests

from ..common.exceptions import ApiAuthError, ApiResponseError, ApiUnavailableError
from ..config.logging_config import api_logger


def extract_message(response: requests.Response) -> Optional[str]:
    """Returns the 'message' (or 'error') field of a JSON error body, if any."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get('message') or body.get('error')
        if message:
            return str(message)
    return None


def decode_body(response: requests.Response) -> Any:
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        api_logger.warning(f"Non-JSON response from {response.url} ({response.status_code})")
        return {}


class ApiClient:
    """Thin wrapper over requests.Session that maps failures onto the portal's error types."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10,
        cookies: Optional[dict] = None,
        on_cookies: Optional[Callable[[dict], None]] = None,
        http: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.http = http or requests.Session()
        self.http.headers.update({'Accept': 'application/json'})
        if cookies:
            self.http.cookies.update(cookies)
        self.on_cookies = on_cookies
        self.closed = False

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    @property
    def cookies(self) -> dict:
        return self.http.cookies.get_dict()

    def request(self, method: str, path: str, **kwargs) -> Any:
        if self.closed:
            raise ApiUnavailableError(path, RuntimeError("client already closed"))

        url = self.url_for(path)
        kwargs.setdefault('timeout', self.timeout)

        try:
            response = self.http.request(method, url, **kwargs)
        except requests.RequestException as exc:
            api_logger.error(f"{method} {path} failed: {exc}")
            raise ApiUnavailableError(path, exc) from exc

        if response.cookies:
            self.http.cookies.update(response.cookies)
            if self.on_cookies:
                self.on_cookies(self.cookies)

        if response.status_code == 401:
            api_logger.info(f"{method} {path} -> 401")
            raise ApiAuthError(path, extract_message(response))

        if not response.ok:
            message = extract_message(response)
            api_logger.warning(f"{method} {path} -> {response.status_code}: {message or response.reason}")
            raise ApiResponseError(path, response.status_code, message)

        api_logger.debug(f"{method} {path} -> {response.status_code}")
        return decode_body(response)

    def get(self, path: str, **kwargs) -> Any:
        return self.request('GET', path, **kwargs)

    def post(self, path: str, json: Any = None, data: Optional[dict] = None, files: Optional[dict] = None, **kwargs) -> Any:
        if files:
            # multipart/form-data; requests builds the boundary itself
            return self.request('POST', path, data=data or json, files=files, **kwargs)
        if data is not None:
            return self.request('POST', path, data=data, **kwargs)
        return self.request('POST', path, json=json, **kwargs)

    def put(self, path: str, json: Any = None, **kwargs) -> Any:
        return self.request('PUT', path, json=json, **kwargs)

    def delete(self, path: str, **kwargs) -> Any:
        return self.request('DELETE', path, **kwargs)

    def close(self) -> None:
        if not self.closed:
            self.http.close()
            self.closed = True
