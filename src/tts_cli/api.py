"""High-level API for tts-cli library usage."""

from pathlib import Path

from .core import speak_text
from .tts.models import DEFAULT_PITCH, DEFAULT_RATE, DEFAULT_VOICE


async def speak(
    text: str,
    voice: str = DEFAULT_VOICE,
    rate: str = DEFAULT_RATE,
    pitch: str = DEFAULT_PITCH,
    output: str | Path | None = None,
    cache: bool = True,
    cache_dir: Path | None = None,
) -> bytes | None:
    """Synthesize speech from text.

    Args:
        text: Text to speak
        voice: Voice short name
        rate: Relative speech rate (e.g. "+20%")
        pitch: Relative pitch (e.g. "-10Hz")
        output: File path to save audio (if None, plays audio)
        cache: Whether to use the audio cache
        cache_dir: Cache root (defaults to ~/.cache/tts-cli)

    Returns:
        Audio bytes if output specified, None if played

    Raises:
        TTSAPIError: If TTS conversion fails
        PlaybackError: If audio playback fails
        OSError: If file save fails
        ValueError: If text is empty
    """
    output_str = str(output) if output else None

    await speak_text(
        text=text,
        voice=voice,
        rate=rate,
        pitch=pitch,
        output_file=output_str,
        cache=cache,
        cache_dir=cache_dir,
    )

    if output:
        output_path = Path(output)
        if output_path.exists():
            return output_path.read_bytes()

    return None
