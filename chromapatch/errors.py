"""Exceptions and warnings raised by chromapatch.

I/O failures are not wrapped: they reach the caller as the built-in
``OSError`` family (``FileNotFoundError``, ``PermissionError``, ...).
"""


class ValidationError(ValueError):
    """Malformed call arguments. Always raised before the target file is touched."""


class PatchWarning(UserWarning):
    """Suspicious but accepted input, e.g. a write that extends the file."""
