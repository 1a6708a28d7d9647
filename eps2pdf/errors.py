from __future__ import annotations


class ConversionError(Exception):
    """Base class for every failure of an EPS to PDF conversion."""


class InvalidInterpreterPath(ConversionError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Ghostscript executable could not be found: {path}")
        self.path = path


class FileReadError(ConversionError):
    pass


class DirectiveNotFound(ConversionError):
    def __init__(self, directive: str) -> None:
        super().__init__(f"Cannot find {directive} directive")
        self.directive = directive


class BoundingBoxParseError(ConversionError):
    pass


class TempFileWriteError(ConversionError):
    pass


class InterpreterInvocationError(ConversionError):
    """Raised when Ghostscript cannot be launched or exits with a nonzero status."""

    def __init__(self, output: str, returncode: int | None = None) -> None:
        super().__init__(output)
        self.output = output
        self.returncode = returncode
