class BibviewError(Exception):
    """Base error for all user-facing bibview exceptions."""


class ConfigurationError(BibviewError):
    """Raised when configuration is invalid or incomplete."""


class ParseError(BibviewError, ValueError):
    """Raised when a bibliography cannot be parsed."""


class BibliographyError(BibviewError):
    """Raised when a bibliography cannot be located, read or queried."""
