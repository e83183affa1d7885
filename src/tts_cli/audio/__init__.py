"""Audio playback package for tts-cli.

This package plays synthesized MP3 audio with pygame, falling back to
the platform's command-line players.
"""

from .player import AudioPlayer, PlaybackError, get_audio_commands

__all__ = ["AudioPlayer", "PlaybackError", "get_audio_commands"]
