"""Domain errors — custom exceptions for the NLG text formatter.

These exceptions are raised by domain services and caught by application
or presentation layers. They carry no infrastructure dependencies.
"""


class FormatterError(Exception):
    """Base exception for all formatter errors."""


class MalformedNodeError(FormatterError):
    """Raised when an element is neither a document node nor a text leaf."""


class StructureTooDeepError(FormatterError):
    """Raised when a document tree is cyclic or nested beyond the depth limit."""


class DocumentLoadError(FormatterError):
    """Raised when a document tree cannot be read or does not match the schema."""


class DocumentGenerationError(FormatterError):
    """Raised when document rendering fails."""


class ConfigurationError(FormatterError):
    """Raised when configuration is invalid or missing."""
