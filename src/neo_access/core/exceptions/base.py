"""Root of the neo-access exception hierarchy.

Every error carries a machine-readable code and a details mapping so API
layers can render it without knowing the concrete class.
"""

from typing import Any, Dict, Optional


class NeoAccessError(Exception):
    """Base exception for all neo-access errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: NeoAccessError) -> Dict[str, Any]:
    """Render an exception as the JSON error body used by the API layer."""
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
