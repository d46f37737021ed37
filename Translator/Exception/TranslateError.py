"""Translation error base class and the failures raised while building suggestions."""
from typing import Optional


class TranslateError(Exception):

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

"""Raised when the translation call itself fails (timeout, non-2xx, transport error)."""
class NetworkOrServiceError(TranslateError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message, status_code)

"""Raised when the repaired payload still cannot be parsed as a nested array."""
class PayloadParseError(TranslateError):
    def __init__(self, message: str = "Unparseable translation payload"):
        super().__init__(message)

"""Raised when the top-level translation response is absent or malformed."""
class InvalidResponseError(TranslateError):
    def __init__(self, message: str = "Invalid translation response"):
        super().__init__(message)

"""Non-fatal: the dictionary section was missing parts or malformed.
        Attributes:
            skipped: number of groups/words that could not be read
"""
class PartialDataError(TranslateError):
    def __init__(self, message: str = "Dictionary section partially unreadable", skipped: int = 0):
        super().__init__(message)
        self.skipped = skipped
