"""Content-addressed audio cache for tts-cli."""

from .errors import CacheError, CacheStorageError
from .models import AUDIO_MPEG, CachedAudio, CacheStats
from .store import ENTRY_SUFFIX, AudioCache, derive_key, get_cache_dir

__all__ = [
    "AUDIO_MPEG",
    "ENTRY_SUFFIX",
    "AudioCache",
    "CacheError",
    "CacheStats",
    "CacheStorageError",
    "CachedAudio",
    "derive_key",
    "get_cache_dir",
]
