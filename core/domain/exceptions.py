"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class InvalidInputError(DomainException):
    """Raised when a request payload is missing or malformed."""

    def __init__(self, message: str = "Invalid input", code: str = "INVALID_INPUT"):
        super().__init__(message, code=code)


class NotFoundError(DomainException):
    """Base exception for references that do not resolve."""

    def __init__(self, message: str = "Resource not found", code: str = "NOT_FOUND"):
        super().__init__(message, code=code)


class ConflictError(DomainException):
    """Base exception for uniqueness violations."""

    def __init__(self, message: str = "Resource already exists", code: str = "CONFLICT"):
        super().__init__(message, code=code)


class BrandNotFoundError(NotFoundError):
    """Raised when a brand is not found."""

    def __init__(self, message: str = "Brand not found"):
        super().__init__(message, code="BRAND_NOT_FOUND")


class BrandAlreadyExistsError(ConflictError):
    """Raised when a brand title or slug is already taken."""

    def __init__(self, message: str = "Brand already exists"):
        super().__init__(message, code="BRAND_ALREADY_EXISTS")


class MissingFileError(InvalidInputError):
    """Raised when an upload carries no file payload."""

    def __init__(self, message: str = "No file was uploaded"):
        super().__init__(message, code="FILE_REQUIRED")


class InvalidUploadPathError(InvalidInputError):
    """Raised when a folder or URL would resolve outside the upload root."""

    def __init__(self, message: str = "Invalid upload path"):
        super().__init__(message, code="INVALID_UPLOAD_PATH")


class FileRemovalError(DomainException):
    """Raised when a stored file exists but cannot be removed."""

    def __init__(self, message: str = "Failed to remove file"):
        super().__init__(message, code="FILE_REMOVAL_FAILED")
