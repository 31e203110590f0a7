"""
Exception classes for the fixed-length file builder.

Every error raised while building is fatal: the build is aborted and no
partial output is kept. All exceptions derive from BuilderError so callers
can catch the whole family at once.
"""

from typing import Optional


class BuilderError(Exception):
    """Base exception for all builder errors."""

    pass


class MissingSourceError(BuilderError):
    """No record source configured before build()."""

    def __init__(self, message: str = "No source specified"):
        super().__init__(message)


class MissingSchemaError(BuilderError):
    """No schema configured before build()."""

    def __init__(self, message: str = "No schema specified"):
        super().__init__(message)


class MissingLengthError(BuilderError):
    """A field rule lacks a valid non-negative integer width.

    Attributes:
        key: The field key of the offending rule
        width: The width value that was found (None if absent)
    """

    def __init__(self, key: str, width: object = None):
        self.key = key
        self.width = width
        if width is None:
            message = f"Field '{key}': width not specified"
        else:
            message = f"Field '{key}': width must be a non-negative integer, got {width!r}"
        super().__init__(message)


class InvalidSchemaError(BuilderError):
    """Numeric width of a field is larger than the field width.

    Attributes:
        key: The field key (None when raised outside a schema)
        numeric_width: The declared numeric width
        width: The declared field width
    """

    def __init__(
        self,
        numeric_width: int,
        width: int,
        key: Optional[str] = None,
        message: Optional[str] = None,
    ):
        self.key = key
        self.numeric_width = numeric_width
        self.width = width
        if message is None:
            message = f"numeric width {numeric_width} exceeds field width {width}"
        if key is not None:
            message = f"Field '{key}': {message}"
        super().__init__(message)


class FormatError(BuilderError):
    """A value could not be formatted.

    Raised when a printf-style template does not match its arguments,
    or when a numeric field receives a non-numeric value.

    Attributes:
        key: The field key (None when raised outside a schema)
        message: Description of the error
    """

    def __init__(self, message: str, key: Optional[str] = None):
        self.key = key
        self.message = message
        if key is not None:
            message = f"Field '{key}': {message}"
        super().__init__(message)

    def attach_key(self, key: str) -> None:
        """Set the field key if the error was raised without one."""
        if self.key is None:
            self.key = key
            self.args = (f"Field '{key}': {self.message}",)


class NumericOverflowError(FormatError):
    """Formatted number does not fit in its field width.

    Attributes:
        formatted: The formatted number that overflowed
        width: The field width
    """

    def __init__(self, formatted: str, width: int, key: Optional[str] = None):
        self.formatted = formatted
        self.width = width
        super().__init__(
            f"number '{formatted.strip()}' does not fit in {width} columns", key=key
        )


class MissingFieldError(BuilderError):
    """A source field is absent from the record.

    Attributes:
        key: The missing field key
    """

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Field '{key}' not found in record")


class LineLengthMismatchError(BuilderError):
    """A line's total width differs from the file's baseline length.

    Attributes:
        expected: Baseline total length established by the first line
        actual: Total length of the offending line
        line_number: One-based number of the offending line
    """

    def __init__(self, expected: int, actual: int, line_number: Optional[int] = None):
        self.expected = expected
        self.actual = actual
        self.line_number = line_number
        message = f"Line length {actual} differs from file length {expected}"
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)


class ConfigError(BuilderError):
    """Configuration error.

    Raised when a configuration, schema or records file is missing or
    does not have the expected shape.
    """

    pass
