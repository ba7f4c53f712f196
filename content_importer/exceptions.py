class ImporterError(Exception):
    """Base class for all errors raised by the content importer."""
    pass


class EmptyInputError(ImporterError):
    """Raised when a document has no content to parse."""

    def __init__(self, message: str = "No content found"):
        super().__init__(message)


class ParseFailedError(ImporterError):
    """Raised when parsing aborts on an unexpected internal failure."""
    pass


class NothingToImportError(ImporterError):
    """Raised when no parsed section has a style mapped to it."""

    def __init__(self, message: str = "No blocks to insert"):
        super().__init__(message)
