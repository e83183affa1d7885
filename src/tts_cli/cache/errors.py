"""Cache exceptions."""


class CacheError(Exception):
    """Base exception for audio cache errors."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.original_error = original_error


class CacheStorageError(CacheError):
    """Raised when the cache directory or an entry cannot be created or written.

    This typically occurs when:
    - Permission is denied on the cache root or one of its parents
    - The disk is full
    - A regular file already sits where the cache directory should be
    """
