from ..constants import MSG_GENERIC_FAILURE, MSG_NO_RESPONSE


class PortalException(Exception):
    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(PortalException):
    pass


class ApiError(PortalException):
    """Any failure talking to the REST API."""

    status = None


class ApiUnavailableError(ApiError):
    def __init__(self, endpoint: str, original_error: Exception = None):
        message = MSG_NO_RESPONSE
        details = {
            'endpoint': endpoint,
            'original_error': str(original_error) if original_error else None
        }
        super().__init__(message, details)


class ApiAuthError(ApiError):
    status = 401

    def __init__(self, endpoint: str, message: str = None):
        super().__init__(message or "Session expired. Please log in again.", {'endpoint': endpoint})


class ApiResponseError(ApiError):
    def __init__(self, endpoint: str, status: int, message: str = None, payload=None):
        self.status = status
        self.server_message = message
        details = {'endpoint': endpoint, 'status': status, 'payload': payload}
        super().__init__(message or MSG_GENERIC_FAILURE, details)

    @property
    def not_found(self):
        return self.status == 404


class AccessDeniedError(PortalException):
    def __init__(self, role: str, path: str):
        message = "Access denied. Your role cannot use this page."
        super().__init__(message, {'role': role, 'path': path})
