"""
Application errors for the store setup and question flow.

Remote API failures are not wrapped: google.genai.errors.APIError and its
subclasses propagate as raised by the SDK. A corrupted cache file is not an
error at all; it reads as a cache miss.
"""

from pathlib import Path


class ConfigurationError(Exception):
    """Raised when a required setting (e.g. GEMINI_API_KEY) is missing."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DocumentNotFoundError(Exception):
    """Raised when the document to index does not exist locally."""

    def __init__(self, path: str | Path) -> None:
        self.path = str(path)
        self.message = f"Sample file not found at {self.path}"
        super().__init__(self.message)


class IndexingTimeoutError(Exception):
    """Raised when an indexing operation is still running after the poll budget."""

    def __init__(self, operation_name: str | None, waited_seconds: float) -> None:
        self.operation_name = operation_name
        self.waited_seconds = waited_seconds
        self.message = (
            f"Indexing operation {operation_name or '<unnamed>'} did not finish "
            f"within {waited_seconds:g}s"
        )
        super().__init__(self.message)


class IndexingFailedError(Exception):
    """Raised when an indexing operation finishes with an error payload."""

    def __init__(self, operation_name: str | None, detail: object) -> None:
        self.operation_name = operation_name
        self.detail = detail
        self.message = f"Indexing operation {operation_name or '<unnamed>'} failed: {detail}"
        super().__init__(self.message)


class StoreCacheWriteError(Exception):
    """Raised when the store cache file cannot be written."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.message = f"Failed to write store cache {self.path}: {reason}"
        super().__init__(self.message)
