"""Data models for the audio cache."""

from dataclasses import dataclass
from pathlib import Path

AUDIO_MPEG = "audio/mpeg"


@dataclass(frozen=True)
class CachedAudio:
    """A cache hit.

    Attributes:
        data: Complete MP3 payload read from the entry file
        path: Location of the entry file
        content_type: MIME type of the payload
    """

    data: bytes
    path: Path
    content_type: str = AUDIO_MPEG

    def __len__(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class CacheStats:
    """Aggregate size of the entries in a cache root."""

    file_count: int
    total_bytes: int
    cache_dir: Path

    @property
    def total_size_mb(self) -> float:
        return self.total_bytes / (1024 * 1024)

    @classmethod
    def empty(cls, cache_dir: Path) -> "CacheStats":
        return cls(file_count=0, total_bytes=0, cache_dir=cache_dir)
