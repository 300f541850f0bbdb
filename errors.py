"""
Errors raised while turning an uploaded file into a dataset.

Every error is terminal for the parse attempt: the caller gets either a full
dataset or one of these, never partial data. ``code`` is the HTTP status the
web app answers with.
"""


class ParseError(Exception):
    """Base class for everything the parser can reject."""

    def __init__(self, message, code=422):
        self.message = message
        self.code = code
        super().__init__(self.message)


class EncodingError(ParseError):
    """The upload is not valid UTF-8 text."""


class StructuralError(ParseError):
    """Fewer lines than a header plus one data row."""


class SchemaError(ParseError):
    """A required header column is missing."""

    def __init__(self, column):
        self.column = column
        super().__init__(f'Missing "{column}" column in CSV')


class RowError(ParseError):
    """A data row failed validation.

    ``line`` is 1-based with the header on line 1, ``value`` is the raw token
    that was rejected.
    """

    def __init__(self, line, reason, value=""):
        self.line = line
        self.reason = reason
        self.value = value
        message = f"Row {line}: {reason}"
        if value:
            message += f' "{value}"'
        super().__init__(message)


class EmptyResultError(ParseError):
    """The file was well formed but held no usable rows."""
