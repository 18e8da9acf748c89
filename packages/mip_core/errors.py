from typing import Optional, Dict, Any


class MIPBaseError(Exception):
    """
    Top-level exception for the MIP project.
    Every custom exception must inherit from this class.

    Attributes:
        code (str): error identifier (e.g. 'NOT_FOUND')
        message (str): human readable message
        status_code (int): HTTP status the API layer responds with
        details (Dict[str, Any]): extra debugging information
    """
    status_code: int = 500

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code
        super().__init__(f"[{code}] {message}")


class ConfigurationError(MIPBaseError):
    """Raised when loading or validating settings fails."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="CONF_ERROR", message=message, details=details, status_code=500)


class ValidationError(MIPBaseError):
    """Request is well-formed but rejected by a business rule."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="VALIDATION_ERROR", message=message, details=details, status_code=400)


class AuthenticationError(MIPBaseError):
    def __init__(self, message: str = "Invalid credentials", details: Optional[Dict[str, Any]] = None):
        super().__init__(code="AUTH_INVALID_CREDENTIALS", message=message, details=details, status_code=401)


class NotFoundError(MIPBaseError):
    def __init__(self, message: str = "Resource not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(code="NOT_FOUND", message=message, details=details, status_code=404)


class ConflictError(MIPBaseError):
    def __init__(self, message: str = "Conflict occurred", details: Optional[Dict[str, Any]] = None):
        super().__init__(code="CONFLICT", message=message, details=details, status_code=409)


class StorageError(MIPBaseError):
    """Backend failed to read or write session data."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="STORAGE_ERROR", message=message, details=details, status_code=500)
