from .middleware import configure_cors, init_security_headers

__all__ = [
    "configure_cors",
    "init_security_headers",
]
