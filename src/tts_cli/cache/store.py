"""Directory-backed audio cache keyed by a digest of the synthesis request.

Every synthesis request is identified by its ``(text, voice, rate, pitch)``
tuple. The tuple is hashed into a 64 character hex key and the MP3 payload
is stored as ``{cache_dir}/{key}.mp3``. There is no index file: existence
and size are always read back from the filesystem, so a crash can never
leave an index out of sync with the entries.

Example:
    cache = AudioCache(Path("/tmp/tts-cache"))

    cached = await cache.lookup("Hello", "en-US-AriaNeural", "+0%", "+0Hz")
    if cached is None:
        audio = await provider.synthesize("Hello", "en-US-AriaNeural", "+0%", "+0Hz")
        await cache.store("Hello", "en-US-AriaNeural", "+0%", "+0Hz", audio)
"""

import asyncio
import hashlib
import logging
import os
import tempfile
from collections.abc import Iterator
from pathlib import Path

from .errors import CacheStorageError
from .models import CachedAudio, CacheStats

logger = logging.getLogger(__name__)

ENTRY_SUFFIX = ".mp3"
TEMP_SUFFIX = ".tmp"
KEY_SEPARATOR = "|"


def get_cache_dir() -> Path:
    """Return the default cache root.

    ``TTS_CLI_CACHE_DIR`` overrides the default of ``~/.cache/tts-cli``.
    The directory is not created here; the cache creates it lazily before
    the first write.
    """
    override = os.getenv("TTS_CLI_CACHE_DIR")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".cache" / "tts-cli"


def derive_key(text: str, voice: str, rate: str, pitch: str) -> str:
    """Derive the cache key for a synthesis request.

    The four fields are joined with ``|`` and hashed with SHA-256. Fields
    are used exactly as given (no trimming or normalisation) and ``|`` is
    not escaped, so ``("a|b", "c")`` and ``("a", "b|c")`` share a key.
    Existing cache directories depend on this exact layout.

    Args:
        text: Text being spoken
        voice: Voice short name
        rate: Speech rate, e.g. ``"+0%"``
        pitch: Voice pitch, e.g. ``"+0Hz"``

    Returns:
        64 character lowercase hex digest
    """
    joined = KEY_SEPARATOR.join((text, voice, rate, pitch))
    return hashlib.sha256(joined.encode("utf-8", "surrogatepass")).hexdigest()


class AudioCache:
    """Best-effort on-disk cache of synthesized MP3 audio.

    Lookups and stats degrade to a miss or zeroed stats on any filesystem
    error, and a failed store is reported through the logger rather than
    raised. Writes go to a temporary file in the cache root and are moved
    into place with ``os.replace``, so a concurrent reader sees either the
    previous entry or the complete new one.
    """

    def __init__(
        self,
        cache_dir: Path | str | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the cache.

        Args:
            cache_dir: Cache root directory (defaults to ``get_cache_dir()``)
            logger: Diagnostic sink for swallowed failures (defaults to the
                module logger)
        """
        self.cache_dir = Path(cache_dir) if cache_dir is not None else get_cache_dir()
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    def path_for(self, key: str) -> Path:
        """Return the entry path for a cache key."""
        return self.cache_dir / f"{key}{ENTRY_SUFFIX}"

    def ensure_ready(self) -> None:
        """Create the cache root and any missing parents.

        Raises:
            CacheStorageError: If the directory cannot be created
        """
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CacheStorageError(
                f"Failed to create cache directory {self.cache_dir}: {e}", e
            ) from e

    async def lookup(
        self, text: str, voice: str, rate: str, pitch: str
    ) -> CachedAudio | None:
        """Return the cached audio for a request, or ``None`` on a miss.

        An entry that cannot be read, or that is empty, is reported as a
        miss. No filesystem error is raised to the caller.
        """
        path = self.path_for(derive_key(text, voice, rate, pitch))

        try:
            data = await asyncio.to_thread(path.read_bytes)
        except FileNotFoundError:
            self._logger.debug(f"Cache miss: {path.name}")
            return None
        except OSError as e:
            self._logger.warning(f"Failed to read cache entry {path}: {e}")
            return None

        if not data:
            self._logger.warning(f"Ignoring empty cache entry {path}")
            return None

        self._logger.debug(f"Cache hit: {path.name} ({len(data)} bytes)")
        return CachedAudio(data=data, path=path)

    async def store(
        self, text: str, voice: str, rate: str, pitch: str, data: bytes
    ) -> bool:
        """Store audio for a request, replacing any existing entry.

        Returns:
            True if the entry was written, False if caching failed (the
            failure is logged as a warning)
        """
        key = derive_key(text, voice, rate, pitch)

        try:
            path = await asyncio.to_thread(self._write_entry, key, data)
        except (CacheStorageError, OSError) as e:
            self._logger.warning(f"Failed to save to cache: {e}")
            return False

        self._logger.debug(f"Cached {len(data)} bytes as {path.name}")
        return True

    async def stats(self) -> CacheStats:
        """Count the entries in the cache root and sum their sizes.

        Creates the cache root if it is missing. Returns zeroed stats if the
        directory cannot be created or listed.
        """
        try:
            return await asyncio.to_thread(self._collect_stats)
        except (CacheStorageError, OSError) as e:
            self._logger.warning(f"Failed to get cache stats: {e}")
            return CacheStats.empty(self.cache_dir)

    async def clear(self) -> int:
        """Delete every entry in the cache root.

        Entries that cannot be deleted are logged and skipped.

        Returns:
            Number of entries actually deleted (0 if the root is missing)
        """
        try:
            deleted = await asyncio.to_thread(self._delete_entries)
        except OSError as e:
            self._logger.warning(f"Failed to clear cache: {e}")
            return 0

        self._logger.debug(f"Cleared {deleted} cache entries from {self.cache_dir}")
        return deleted

    def _write_entry(self, key: str, data: bytes) -> Path:
        self.ensure_ready()
        target = self.path_for(key)

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{key}.", suffix=TEMP_SUFFIX, dir=self.cache_dir
        )
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_path, target)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise

        return target

    def _entry_paths(self) -> Iterator[Path]:
        """Yield entry files directly inside the cache root.

        Only regular files ending in ``.mp3`` count; symlinks, directories
        and other files are ignored.
        """
        for path in self.cache_dir.iterdir():
            if not path.name.endswith(ENTRY_SUFFIX):
                continue
            if path.is_symlink() or not path.is_file():
                continue
            yield path

    def _collect_stats(self) -> CacheStats:
        self.ensure_ready()

        file_count = 0
        total_bytes = 0
        for path in self._entry_paths():
            try:
                size = path.stat().st_size
            except FileNotFoundError:
                # Removed by a concurrent clear
                continue
            file_count += 1
            total_bytes += size

        return CacheStats(
            file_count=file_count, total_bytes=total_bytes, cache_dir=self.cache_dir
        )

    def _delete_entries(self) -> int:
        if not self.cache_dir.is_dir():
            return 0

        deleted = 0
        for path in list(self._entry_paths()):
            try:
                path.unlink()
            except FileNotFoundError:
                continue
            except OSError as e:
                self._logger.warning(f"Failed to delete cache entry {path}: {e}")
                continue
            deleted += 1

        return deleted
