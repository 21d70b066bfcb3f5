"""Errors raised by the codec and the request handlers."""


class StudentRecordsError(Exception):
    """Base error for this package."""


class MalformedRowError(StudentRecordsError):
    """Raised in strict mode when a data row does not match the header."""

    def __init__(self, line_no, expected, got):
        super().__init__(f"line {line_no}: expected {expected} fields, got {got}")
        self.line_no = line_no
        self.expected = expected
        self.got = got


class ValidationError(StudentRecordsError):
    """Raised when a request is missing a required parameter."""

    status = 400
