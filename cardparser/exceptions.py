"""
Exception types raised by the business card parser.

Missing fields are never errors: extractors report them as ``None``.
"""


class CardParserError(Exception):
    """Base class for all parser errors."""


class ConfigurationError(CardParserError):
    """A configured parser bundle or tagger model cannot be instantiated."""


class DocumentLoadError(CardParserError):
    """The source document could not be read."""

    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        self.reason = reason
        message = f"Unable to load file: {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
