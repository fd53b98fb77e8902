"""
Exception hierarchy shared by the keyword counting layers.

Malformed keyword files are not wrapped: the parser's own exception
(``json.JSONDecodeError`` or ``yaml.YAMLError``) reaches the caller.
"""


class KeywordCountError(Exception):
    """Base exception for keyword counting errors."""


class MissingInputError(KeywordCountError):
    """Raised when no usable keyword source was given."""


class EmptyFileError(KeywordCountError):
    """Raised when the keyword file exists but has no content."""


class NotFoundError(KeywordCountError):
    """Raised when a target path cannot be stat'd or listed."""


class ScanError(KeywordCountError):
    """Raised when the line filter fails on a file."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class ReportError(KeywordCountError):
    """Raised when the report cannot be written."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path
