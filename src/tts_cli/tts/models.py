"""TTS data models with validation."""

import re
from dataclasses import dataclass

DEFAULT_VOICE = "en-US-AriaNeural"
DEFAULT_RATE = "+0%"
DEFAULT_PITCH = "+0Hz"

_RATE_PATTERN = re.compile(r"^[+-]\d+%$")
_PITCH_PATTERN = re.compile(r"^[+-]\d+Hz$")


@dataclass(frozen=True)
class SpeechSettings:
    """Voice, rate and pitch for one synthesis request.

    Args:
        voice: Voice short name (e.g. "en-GB-SoniaNeural")
        rate: Relative speech rate (e.g. "+20%", "-10%")
        pitch: Relative pitch (e.g. "+10Hz", "-20Hz")
    """

    voice: str = DEFAULT_VOICE
    rate: str = DEFAULT_RATE
    pitch: str = DEFAULT_PITCH

    def __post_init__(self) -> None:
        """Validate speech settings."""
        if not self.voice or not self.voice.strip():
            raise ValueError("voice cannot be empty")
        if not _RATE_PATTERN.match(self.rate):
            raise ValueError(
                f"rate must look like +20% or -10%, got {self.rate!r}"
            )
        if not _PITCH_PATTERN.match(self.pitch):
            raise ValueError(
                f"pitch must look like +10Hz or -20Hz, got {self.pitch!r}"
            )

    @property
    def is_default_rate(self) -> bool:
        return self.rate == DEFAULT_RATE

    @property
    def is_default_pitch(self) -> bool:
        return self.pitch == DEFAULT_PITCH


@dataclass
class VoiceInfo:
    """Information about an available voice.

    Args:
        short_name: Identifier passed to the service (e.g. "en-US-AriaNeural")
        locale: Voice locale (e.g. "en-US")
        gender: Voice gender as reported by the service
        friendly_name: Optional display name
    """

    short_name: str
    locale: str
    gender: str
    friendly_name: str | None = None

    def __post_init__(self) -> None:
        """Validate voice information."""
        if not self.short_name or not self.short_name.strip():
            raise ValueError("short_name cannot be empty")

    @property
    def language(self) -> str:
        """Language part of the locale, or "unknown" when there is none."""
        return (self.locale or "").split("-")[0] or "unknown"
