"""Display helpers for CLI output."""

from collections.abc import Iterable

from .cache import CacheStats
from .tts.models import VoiceInfo

VOICES_PER_LANGUAGE = 5


def format_text(text: str, max_length: int = 50) -> str:
    """Truncate text for display, appending "..." when it was cut."""
    if len(text) > max_length:
        return f"{text[:max_length]}..."
    return text


def format_voices(voices: Iterable[VoiceInfo]) -> list[str]:
    """Group voices by language for display.

    Languages appear in the order first seen. Each group lists its first
    five voices, then a count of the rest.
    """
    grouped: dict[str, list[VoiceInfo]] = {}
    total = 0
    for voice in voices:
        grouped.setdefault(voice.language, []).append(voice)
        total += 1

    lines = []
    for language, voice_list in grouped.items():
        lines.append(f"[{language.upper()}] {len(voice_list)} voices")
        for voice in voice_list[:VOICES_PER_LANGUAGE]:
            lines.append(f"  {voice.short_name:<25} ({voice.gender})")
        if len(voice_list) > VOICES_PER_LANGUAGE:
            lines.append(f"  ... and {len(voice_list) - VOICES_PER_LANGUAGE} more")
    lines.append(f"Total: {total} voices available")
    return lines


def format_cache_stats(stats: CacheStats) -> list[str]:
    """Render cache statistics as human-readable lines."""
    return [
        f"Cache directory: {stats.cache_dir}",
        f"Cached files: {stats.file_count}",
        f"Total size: {stats.total_size_mb:.2f} MB",
    ]
