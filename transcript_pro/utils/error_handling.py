"""
Centralized error handling for the application.

The exception classes below form the error taxonomy shared by the core
pipeline, the YouTube acquisition layer and the tools. ``to_rpc_error``
maps any of them onto a JSON-RPC 2.0 error object.
"""

from typing import Optional, Dict, Any

from pydantic import ValidationError


class ErrorCodes:
    """JSON-RPC 2.0 standard error codes."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


class TranscriptError(Exception):
    """Base class for every error raised by this package."""

    rpc_code = ErrorCodes.INTERNAL_ERROR


class InvalidTimestamp(TranscriptError):
    """A timestamp string could not be parsed into seconds."""

    rpc_code = ErrorCodes.INVALID_PARAMS

    def __init__(self, timestamp: str, reason: str):
        self.timestamp = timestamp
        self.reason = reason
        super().__init__(f"Invalid timestamp '{timestamp}': {reason}")


class UnsupportedFormat(TranscriptError):
    """An output format outside json, srt, vtt, csv and txt was requested."""

    rpc_code = ErrorCodes.INVALID_PARAMS

    def __init__(self, format_name: str):
        self.format_name = format_name
        super().__init__(
            f"Invalid format: '{format_name}'. Supported formats: json, srt, vtt, csv, txt"
        )


class InvalidVideoURL(TranscriptError):
    rpc_code = ErrorCodes.INVALID_PARAMS


class VideoUnavailable(TranscriptError):
    pass


class TranscriptUnavailable(TranscriptError):
    pass


class MissingAPIKey(TranscriptError):
    pass


class OutputFileError(TranscriptError):
    pass


class RPCError(Exception):
    """Error raised inside the dispatcher that already carries a JSON-RPC code."""

    def __init__(self, code: int, message: str, data: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.data = data
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        error = {"code": self.code, "message": self.message}
        if self.data is not None:
            error["data"] = self.data
        return error


def to_rpc_error(error: Exception) -> Dict[str, Any]:
    """
    Convert an exception into a JSON-RPC error object.

    Args:
        error: The exception raised while handling a request

    Returns:
        Dictionary with ``code``, ``message`` and optionally ``data``
    """
    if isinstance(error, RPCError):
        return error.to_dict()

    if isinstance(error, ValidationError):
        return {
            "code": ErrorCodes.INVALID_PARAMS,
            "message": "Invalid params",
            "data": {"errors": error.errors(include_url=False, include_context=False)},
        }

    if isinstance(error, TranscriptError):
        return {"code": error.rpc_code, "message": str(error)}

    return {
        "code": ErrorCodes.INTERNAL_ERROR,
        "message": str(error) or error.__class__.__name__,
        "data": {"type": error.__class__.__name__},
    }
