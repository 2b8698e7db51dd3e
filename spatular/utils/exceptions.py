from fastapi import HTTPException, status
from typing import Optional


class SpatularError(Exception):
    """Base class for tokenizer errors."""

    code = "SPATULAR_ERROR"


class DictionaryLoadError(SpatularError):
    """A word list could not be read (missing, unreadable or not UTF-8)."""

    code = "DICTIONARY_LOAD_FAILED"

    def __init__(self, path, cause: Optional[BaseException] = None):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Could not load dictionary from {self.path}: {cause}")


class APIException(HTTPException):
    """Flexible API Exception."""

    def __init__(self, status_code: int, code: str, message: Optional[str] = None):
        detail = {"code": code, "message": message or "An error occurred"}
        super().__init__(status_code=status_code, detail=detail)


class NotFoundError(APIException):
    """404 Not Found Error."""

    def __init__(self, code: str, message: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND, code=code, message=message
        )


class BadRequestError(APIException):
    """400 Bad Request Error."""

    def __init__(self, code: str, message: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST, code=code, message=message
        )


class ServerError(APIException):
    """500 Internal Server Error."""

    def __init__(self, code: str, message: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            code=code,
            message=message,
        )
