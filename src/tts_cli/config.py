"""Configuration management for tts-cli.

Loads configuration from ~/.config/tts-cli/config.toml.
Priority chain: CLI flags > env vars > config file > built-in defaults.
"""

import os
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path

from .cache import get_cache_dir
from .tts.models import DEFAULT_PITCH, DEFAULT_RATE, DEFAULT_VOICE

CONFIG_DIR = Path.home() / ".config" / "tts-cli"
CONFIG_PATH = CONFIG_DIR / "config.toml"

DEFAULT_CONFIG = f"""\
# tts-cli configuration

[tts]
# Voice short name; list them with `tts-cli --list-voices`
voice = "{DEFAULT_VOICE}"

# Relative speech rate, e.g. "+20%" or "-10%"
rate = "{DEFAULT_RATE}"

# Relative pitch, e.g. "+10Hz" or "-20Hz"
pitch = "{DEFAULT_PITCH}"

[cache]
# Keep synthesized audio on disk and reuse it for identical requests
enabled = true

# Cache directory (defaults to ~/.cache/tts-cli)
# directory = "~/.cache/tts-cli"

# Environment overrides:
#   TTS_CLI_VOICE, TTS_CLI_RATE, TTS_CLI_PITCH
#   TTS_CLI_CACHE_DIR  - cache directory
#   TTS_CLI_NO_CACHE   - set to 1 to disable the cache
"""

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class TTSConfig:
    """Speech defaults."""

    voice: str
    rate: str
    pitch: str


@dataclass(frozen=True)
class CacheConfig:
    """Audio cache configuration."""

    enabled: bool
    directory: Path


@dataclass(frozen=True)
class TtsCliConfig:
    """Top-level tts-cli configuration."""

    tts: TTSConfig
    cache: CacheConfig


_cached_config: TtsCliConfig | None = None


def generate_config() -> Path:
    """Write the default config file to ~/.config/tts-cli/config.toml."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    CONFIG_PATH.write_text(DEFAULT_CONFIG)
    return CONFIG_PATH


def reset_config() -> None:
    """Forget the loaded configuration so the next load re-reads it."""
    global _cached_config
    _cached_config = None


def load_config() -> TtsCliConfig:
    """Load configuration from config file with env var overrides.

    A missing config file is not an error; the built-in defaults are used.

    Returns:
        Loaded TtsCliConfig.

    Raises:
        SystemExit: If the config file exists but cannot be parsed.
    """
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    if CONFIG_PATH.exists():
        try:
            with open(CONFIG_PATH, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            print(f"Invalid config file {CONFIG_PATH}: {e}", file=sys.stderr)
            print("Fix it or delete it to use the defaults.", file=sys.stderr)
            raise SystemExit(1) from e
    else:
        data = tomllib.loads(DEFAULT_CONFIG)

    tts = data.get("tts", {})
    cache = data.get("cache", {})

    # Env vars override config file values
    cache_dir = os.getenv("TTS_CLI_CACHE_DIR") or cache.get("directory")
    no_cache = os.getenv("TTS_CLI_NO_CACHE", "").strip().lower() in _TRUTHY

    _cached_config = TtsCliConfig(
        tts=TTSConfig(
            voice=os.getenv("TTS_CLI_VOICE", tts.get("voice", DEFAULT_VOICE)),
            rate=os.getenv("TTS_CLI_RATE", tts.get("rate", DEFAULT_RATE)),
            pitch=os.getenv("TTS_CLI_PITCH", tts.get("pitch", DEFAULT_PITCH)),
        ),
        cache=CacheConfig(
            enabled=bool(cache.get("enabled", True)) and not no_cache,
            directory=Path(cache_dir).expanduser() if cache_dir else get_cache_dir(),
        ),
    )

    return _cached_config
