"""Core functionality for tts-cli - orchestrates TTS, cache and audio operations."""

import logging
from pathlib import Path
from typing import Any

from .cache import AudioCache, CacheStats
from .providers import DEFAULT_PROVIDER, ProviderRegistry
from .tts.errors import TTSAPIError
from .tts.models import (
    DEFAULT_PITCH,
    DEFAULT_RATE,
    DEFAULT_VOICE,
    SpeechSettings,
    VoiceInfo,
)
from .tts.pipeline import TTSPipeline

logger = logging.getLogger(__name__)


async def list_available_voices(provider: str = DEFAULT_PROVIDER) -> list[VoiceInfo]:
    """Return all voices offered by a provider.

    Raises:
        TTSAPIError: If the voice list cannot be fetched
        KeyError: If provider not found
    """
    provider_instance = ProviderRegistry.get_instance(provider)
    try:
        return await provider_instance.list_voices()
    except TTSAPIError:
        raise
    except Exception as e:
        raise TTSAPIError(f"Failed to list voices: {e}", None, e) from e


async def speak_text(
    text: str,
    voice: str = DEFAULT_VOICE,
    rate: str = DEFAULT_RATE,
    pitch: str = DEFAULT_PITCH,
    output_file: str | Path | None = None,
    cache: bool = True,
    cache_dir: Path | None = None,
    provider: str = DEFAULT_PROVIDER,
) -> dict[str, Any]:
    """Convert text to speech and play or save the audio.

    Args:
        text: Text to convert to speech
        voice: Voice short name
        rate: Relative speech rate
        pitch: Relative pitch
        output_file: Optional file path to save audio. If not provided, plays
            through speakers
        cache: Whether to use the audio cache
        cache_dir: Cache root (defaults to ~/.cache/tts-cli)
        provider: Provider name to use for synthesis

    Returns:
        Pipeline result with "played", "saved", "cached" and "bytes" keys

    Raises:
        TTSAPIError: If TTS conversion fails
        PlaybackError: If audio playback fails
        OSError: If file save fails
        ValueError: If text is empty or settings are malformed
        KeyError: If provider not found
    """
    settings = SpeechSettings(voice=voice, rate=rate, pitch=pitch)
    provider_instance = ProviderRegistry.get_instance(provider)
    audio_cache = AudioCache(cache_dir) if cache else None

    pipeline = TTSPipeline(cache=audio_cache, provider=provider_instance)
    result = await pipeline.process(
        text, settings, output=output_file, use_cache=cache
    )
    logger.debug(f"Speech request finished: {result}")
    return result


async def clear_cache(cache_dir: Path | None = None) -> int:
    """Delete all cached audio and return how many entries were removed."""
    return await AudioCache(cache_dir).clear()


async def get_cache_stats(cache_dir: Path | None = None) -> CacheStats:
    """Return file count and total size of the audio cache."""
    return await AudioCache(cache_dir).stats()
