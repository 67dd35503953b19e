from typing import Any, Dict, Optional


class ErrorCode:
    AUTH_ERROR = "AUTH_ERROR"
    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    NETWORK_ERROR = "NETWORK_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"

    ALL = (
        AUTH_ERROR,
        FILE_NOT_FOUND,
        NETWORK_ERROR,
        VALIDATION_ERROR,
        PERMISSION_DENIED,
        UNKNOWN_ERROR,
    )


class KDEError(RuntimeError):
    code = ErrorCode.UNKNOWN_ERROR

    def __init__(self, message: str, code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.details = details


class AuthError(KDEError):
    code = ErrorCode.AUTH_ERROR


class ConfigError(KDEError):
    code = ErrorCode.VALIDATION_ERROR


class VFSError(KDEError):
    """A filesystem route answered with a non-2xx status."""

    code = ErrorCode.NETWORK_ERROR

    def __init__(self, operation: str, status_text: str):
        super().__init__(f"{operation}: {status_text}", details={"operation": operation})
        self.operation = operation
        self.status_text = status_text


def create_error(code: str, message: str, details: Optional[Dict[str, Any]] = None) -> KDEError:
    if code not in ErrorCode.ALL:
        raise ValueError(f"Unknown error code: {code!r}")
    return KDEError(message, code=code, details=details)


def is_kde_error(error: Any) -> bool:
    return isinstance(error, KDEError)


def get_error_message(error: Any) -> str:
    if is_kde_error(error):
        return f"{error.code}: {error.message}"
    return "Unknown error"
