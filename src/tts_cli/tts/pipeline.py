"""TTS pipeline orchestrator for tts-cli.

Coordinates the audio cache, a TTS provider and the AudioPlayer to take a
piece of text to audio that is either played or saved.
"""

import logging
from pathlib import Path
from typing import Any

from ..audio.player import AudioPlayer
from ..cache import AudioCache
from ..providers import DEFAULT_PROVIDER, ProviderRegistry
from ..providers.base import TTSProvider
from .models import SpeechSettings

logger = logging.getLogger(__name__)


class TTSPipeline:
    """Orchestrates the TTS workflow from text to audio output.

    Looks the request up in the cache, synthesizes on a miss, stores the
    result and then saves or plays it. Components not passed in are
    created on demand.

    Example:
        pipeline = TTSPipeline(cache=AudioCache())

        result = await pipeline.process(
            "Build finished",
            SpeechSettings(voice="en-GB-SoniaNeural"),
            output="/tmp/output.mp3",
        )
        # Returns: {"played": False, "saved": "/tmp/output.mp3",
        #           "cached": False, "bytes": 18432}
    """

    def __init__(
        self,
        cache: AudioCache | None = None,
        audio_player: AudioPlayer | None = None,
        provider: TTSProvider | None = None,
    ) -> None:
        self.cache = cache
        self.audio_player = audio_player
        self.provider = provider

    async def synthesize(
        self, text: str, settings: SpeechSettings, use_cache: bool = True
    ) -> tuple[bytes, bool]:
        """Return audio for the text and whether it came from the cache.

        Cache failures never abort synthesis; they are logged by the cache
        and the request falls through to the provider.

        Raises:
            TTSAPIError: If the provider fails
            ValueError: If text is empty
        """
        if not text or not text.strip():
            raise ValueError("Text cannot be empty")

        if use_cache and self.cache is None:
            self.cache = AudioCache()
            logger.debug(f"Created audio cache at {self.cache.cache_dir}")

        if use_cache and self.cache is not None:
            cached = await self.cache.lookup(
                text, settings.voice, settings.rate, settings.pitch
            )
            if cached is not None:
                logger.debug(f"Cache hit! Using cached audio from: {cached.path}")
                return cached.data, True
            logger.debug("Cache miss - will generate new audio")

        if self.provider is None:
            self.provider = ProviderRegistry.get_instance(DEFAULT_PROVIDER)

        logger.debug(f"Calling {self.provider.name} TTS service for synthesis")
        audio_data = await self.provider.synthesize(
            text, settings.voice, settings.rate, settings.pitch
        )

        if use_cache and self.cache is not None:
            await self.cache.store(
                text, settings.voice, settings.rate, settings.pitch, audio_data
            )

        return audio_data, False

    async def process(
        self,
        text: str,
        settings: SpeechSettings,
        output: str | Path | None = None,
        use_cache: bool = True,
    ) -> dict[str, Any]:
        """Process complete TTS workflow from text to audio output.

        Args:
            text: Text to convert to speech
            settings: Voice, rate and pitch
            output: Output file path (None plays through speakers)
            use_cache: Whether to read from and write to the audio cache

        Returns:
            Dictionary with workflow results:
                {
                    "played": bool,      # True if played through speakers
                    "saved": str | None, # File path if saved to disk
                    "cached": bool,      # True if audio came from cache
                    "bytes": int         # Size of the audio payload
                }

        Raises:
            TTSAPIError: If TTS service call fails
            PlaybackError: If audio playback fails
            OSError: If saving the output file fails
            ValueError: If text is empty
        """
        audio_data, cache_hit = await self.synthesize(text, settings, use_cache)

        if self.audio_player is None:
            self.audio_player = AudioPlayer(use_mixer=output is None)

        if output:
            self.audio_player.save_to_file(audio_data, output)
            return {
                "played": False,
                "saved": str(output),
                "cached": cache_hit,
                "bytes": len(audio_data),
            }

        await self.audio_player.play_bytes_async(audio_data)
        return {
            "played": True,
            "saved": None,
            "cached": cache_hit,
            "bytes": len(audio_data),
        }
