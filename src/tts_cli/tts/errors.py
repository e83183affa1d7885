"""Custom TTS exceptions."""


class TTSError(Exception):
    """Base exception for TTS-related errors."""

    def __init__(
        self, message: str, original_error: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_error = original_error


class TTSAPIError(TTSError):
    """Exception raised for speech service communication errors.

    This typically occurs when:
    - The service returns an error or closes the connection
    - No audio data comes back for the request
    - The request parameters are rejected
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.status_code = status_code


class TTSVoiceError(TTSAPIError):
    """Exception raised when the requested voice is unknown to the service."""


class TTSNetworkError(TTSAPIError):
    """Exception raised when the speech service cannot be reached."""
