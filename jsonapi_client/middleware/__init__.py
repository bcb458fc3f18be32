"""Transport middleware for JSON:API requests."""

from .content_negotiation import ContentNegotiationMiddleware
from .error_handler import ErrorHandlerMiddleware
from .key_format import KeyFormatMiddleware

__all__ = ["ContentNegotiationMiddleware", "ErrorHandlerMiddleware", "KeyFormatMiddleware"]
