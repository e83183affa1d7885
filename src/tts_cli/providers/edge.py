"""Microsoft Edge read-aloud TTS provider implementation."""

import asyncio
import logging

import edge_tts
from edge_tts.exceptions import NoAudioReceived

from ..tts.errors import TTSAPIError, TTSNetworkError, TTSVoiceError
from ..tts.models import VoiceInfo
from .base import TTSProvider

logger = logging.getLogger(__name__)

SERVICE_HOST = "speech.platform.bing.com"


class EdgeTTSProvider(TTSProvider):
    """TTS provider backed by the Edge read-aloud service via edge-tts.

    No API key is needed. Voices are fetched once per instance and
    reused for later ``list_voices`` calls.
    """

    name = "edge"

    def __init__(self) -> None:
        """Initialize Edge provider."""
        self._voices_cache: list[VoiceInfo] | None = None

    async def synthesize(self, text: str, voice: str, rate: str, pitch: str) -> bytes:
        """Convert text to speech audio bytes.

        Args:
            text: Text to convert to speech
            voice: Voice short name (e.g. "en-US-AriaNeural")
            rate: Relative speech rate (e.g. "+20%")
            pitch: Relative pitch (e.g. "-10Hz")

        Returns:
            Audio data as bytes (MP3 format)

        Raises:
            TTSVoiceError: If the voice name is rejected
            TTSNetworkError: If the service cannot be reached
            TTSAPIError: If the service fails or returns no audio
            ValueError: If text is empty
        """
        if not text or not text.strip():
            raise ValueError("Text cannot be empty")

        try:
            communicate = edge_tts.Communicate(text, voice, rate=rate, pitch=pitch)
        except ValueError as e:
            if "voice" in str(e).lower():
                raise TTSVoiceError(f"Invalid voice {voice!r}: {e}", None, e) from e
            raise TTSAPIError(f"Invalid synthesis parameters: {e}", None, e) from e

        chunks: list[bytes] = []
        try:
            async for chunk in communicate.stream():
                if chunk["type"] == "audio":
                    chunks.append(chunk["data"])
        except NoAudioReceived as e:
            raise TTSVoiceError(
                f"No audio received for voice {voice!r}: {e}", None, e
            ) from e
        except (OSError, asyncio.TimeoutError) as e:
            raise TTSNetworkError(
                f"Cannot reach {SERVICE_HOST} (network error): {e}", None, e
            ) from e
        except Exception as e:
            raise TTSAPIError(f"Synthesis failed: {e}", None, e) from e

        audio_bytes = b"".join(chunks)
        if not audio_bytes:
            raise TTSAPIError("No audio data received from service")

        logger.debug(f"Synthesized {len(audio_bytes)} bytes with voice {voice}")
        return audio_bytes

    async def list_voices(self) -> list[VoiceInfo]:
        """Get list of available voices.

        Results are cached after first call to avoid repeated requests.

        Raises:
            TTSNetworkError: If the service cannot be reached
            TTSAPIError: If the voice list cannot be fetched
        """
        if self._voices_cache is not None:
            return self._voices_cache

        try:
            raw_voices = await edge_tts.list_voices()
        except (OSError, asyncio.TimeoutError) as e:
            raise TTSNetworkError(
                f"Cannot reach {SERVICE_HOST} (network error): {e}", None, e
            ) from e
        except Exception as e:
            raise TTSAPIError(f"Failed to list voices: {e}", None, e) from e

        voices = [
            VoiceInfo(
                short_name=voice["ShortName"],
                locale=voice.get("Locale", ""),
                gender=voice.get("Gender", ""),
                friendly_name=voice.get("FriendlyName"),
            )
            for voice in raw_voices
            if voice.get("ShortName")
        ]

        self._voices_cache = voices
        return voices
