"""Abstract base class for text-to-speech providers.

This module defines the interface that all TTS providers must implement,
ensuring the cache and pipeline can treat every backend the same way.
"""

from abc import ABC, abstractmethod

from ..tts.models import VoiceInfo


class TTSProvider(ABC):
    """Abstract base class for text-to-speech providers.

    All TTS providers must inherit from this class and implement
    the required methods for synthesizing speech and listing voices.
    """

    name: str = ""

    @abstractmethod
    async def synthesize(self, text: str, voice: str, rate: str, pitch: str) -> bytes:
        """Convert text to MP3 audio bytes.

        Args:
            text: The text to convert to speech
            voice: Voice short name to use for synthesis
            rate: Relative speech rate (e.g. "+0%")
            pitch: Relative pitch (e.g. "+0Hz")

        Returns:
            Audio data as bytes (MP3 format)

        Raises:
            TTSAPIError: If synthesis fails
            ValueError: If text is empty
        """

    @abstractmethod
    async def list_voices(self) -> list[VoiceInfo]:
        """Return available voices for this provider.

        Raises:
            TTSAPIError: If voice listing fails
        """
