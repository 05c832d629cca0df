"""Error utility for CSS Stylecheck."""

class StyleCheckError(Exception):
    """Base exception for CSS Stylecheck."""
    pass

class FileOperationError(StyleCheckError):
    """Raised when file operations fail."""
    pass

class MarkupError(StyleCheckError):
    """Raised when markup cannot be loaded or parsed."""
    pass

class ConfigurationError(StyleCheckError):
    """Raised when configuration is invalid."""
    pass

class CssSyntaxError(StyleCheckError):
    """Raised by the structural parser on malformed CSS.

    The linter turns this into a single diagnostic instead of letting it
    escape, so it never reaches the caller of ``validate``.
    """

    def __init__(self, line: int, message: str):
        self.line = max(int(line or 1), 1)
        self.message = message.strip()
        super().__init__(f"line {self.line}: {self.message}")

# Exported exceptions
__all__ = [
    'StyleCheckError',
    'FileOperationError',
    'MarkupError',
    'ConfigurationError',
    'CssSyntaxError',
]
