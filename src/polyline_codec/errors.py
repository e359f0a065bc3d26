"""
Error handling for the polyline codec.

Every failure raised by the codec derives from PolylineError and carries a
stable ErrorCode so callers can branch on the kind of failure without
matching message text.

Usage:
    from polyline_codec.errors import MalformedPolylineError

    try:
        points = decode(text)
    except MalformedPolylineError as e:
        log.warning("bad_polyline", **e.to_dict())
"""
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Standard error codes raised by the codec."""

    INVALID_POINT = "INVALID_POINT"
    MALFORMED_POLYLINE = "MALFORMED_POLYLINE"
    INVALID_PRECISION = "INVALID_PRECISION"
    INVALID_GEOMETRY = "INVALID_GEOMETRY"
    CONFIG_ERROR = "CONFIG_ERROR"


class ErrorResponse(BaseModel):
    """
    Serializable error payload.

    Example:
    {
        "error": true,
        "code": "MALFORMED_POLYLINE",
        "message": "Polyline ends inside a scalar",
        "detail": "continuation bit set at position 8"
    }
    """
    error: bool = True
    code: ErrorCode
    message: str
    detail: Optional[str] = None


class PolylineError(Exception):
    """
    Base exception for all codec errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        detail: Optional[str] = None
    ):
        self.code = code
        self.message = message
        self.detail = detail
        super().__init__(message if detail is None else f"{message}: {detail}")

    def to_dict(self) -> Dict[str, Any]:
        return ErrorResponse(
            code=self.code,
            message=self.message,
            detail=self.detail,
        ).model_dump(mode="json")


# ==============================================================================
# Input Errors
# ==============================================================================

class InvalidPointError(PolylineError, ValueError):
    """A point to encode does not match any recognized representation."""
    def __init__(self, message: str, index: Optional[int] = None, detail: Optional[str] = None):
        super().__init__(ErrorCode.INVALID_POINT, message, detail)
        self.index = index


class MalformedPolylineError(PolylineError, ValueError):
    """A polyline string does not form complete, well-terminated scalar pairs."""
    def __init__(self, message: str, position: Optional[int] = None, detail: Optional[str] = None):
        super().__init__(ErrorCode.MALFORMED_POLYLINE, message, detail)
        self.position = position


class InvalidPrecisionError(PolylineError, ValueError):
    """Precision is not a non-negative integer."""
    def __init__(self, precision: Any):
        super().__init__(
            ErrorCode.INVALID_PRECISION,
            "Precision must be a non-negative integer",
            f"got {precision!r}",
        )
        self.precision = precision


class InvalidGeometryError(PolylineError, ValueError):
    """A GeoJSON geometry could not be validated."""
    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(ErrorCode.INVALID_GEOMETRY, message, detail)


class ConfigurationError(PolylineError):
    """Raised when required configuration is missing or invalid."""
    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(ErrorCode.CONFIG_ERROR, message, detail)
