from .security_headers import SECURITY_HEADERS, SecurityHeadersMiddleware

__all__ = ["SECURITY_HEADERS", "SecurityHeadersMiddleware"]
