"""Audio player using pygame, with command-line players as a fallback."""

# ruff: noqa: E402
import os

# Suppress pygame's welcome message BEFORE any pygame import
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import warnings

# Suppress pygame's pkg_resources deprecation warning spam
warnings.filterwarnings("ignore", category=UserWarning, module="pygame.pkgdata")

import asyncio
import io
import logging
import platform
import shutil
import subprocess
import tempfile
from pathlib import Path

import pygame

logger = logging.getLogger(__name__)


class PlaybackError(RuntimeError):
    """Raised when no playback method could play the audio.

    Attributes:
        saved_path: Temporary file the audio was left in, if any
    """

    def __init__(self, message: str, saved_path: Path | None = None) -> None:
        super().__init__(message)
        self.saved_path = saved_path


def get_audio_commands(system: str, file: str) -> list[list[str]]:
    """Return the player commands to try, in order, for a platform.

    Args:
        system: Value of ``platform.system()`` ("Darwin", "Windows", "Linux")
        file: Path of the audio file to play

    Returns:
        Argument lists; unknown platforms get the Linux players
    """
    if system == "Darwin":
        return [["afplay", file]]
    if system == "Windows":
        return [
            [
                "powershell",
                "-c",
                f"(New-Object Media.SoundPlayer '{file}').PlaySync()",
            ]
        ]
    return [
        ["ffplay", "-nodisp", "-autoexit", "-loglevel", "quiet", file],
        ["aplay", file],
        ["mpg123", "-q", file],
        ["play", file],
    ]


class AudioPlayer:
    """Plays MP3 audio from bytes or saves it to a file.

    The pygame mixer is used when it can be initialised. On machines
    without an audio device for SDL, playback falls back to the
    platform's command-line players.
    """

    def __init__(self, use_mixer: bool = True) -> None:
        """Initialize the audio player.

        Args:
            use_mixer: Try the pygame mixer before command-line players
        """
        self.mixer_available = False
        if use_mixer:
            try:
                pygame.mixer.init()
                self.mixer_available = True
            except pygame.error as e:
                logger.debug(
                    f"pygame mixer unavailable ({e}), using command-line players"
                )

    def play_bytes(self, audio_data: bytes) -> None:
        """Play audio from bytes through system speakers (blocking).

        Args:
            audio_data: Audio data in MP3 format.

        Raises:
            ValueError: If no audio data provided.
            PlaybackError: If audio playback fails.
        """
        if not audio_data:
            raise ValueError("No audio data provided")

        if self.mixer_available:
            try:
                self._play_with_mixer(audio_data)
                return
            except pygame.error as e:
                logger.debug(f"pygame playback failed ({e}), trying players")

        self._play_with_commands(audio_data)

    async def play_bytes_async(self, audio_data: bytes) -> None:
        """Play audio from bytes through system speakers (async).

        Raises:
            ValueError: If no audio data provided.
            PlaybackError: If audio playback fails.
        """
        if not audio_data:
            raise ValueError("No audio data provided")

        # Run blocking playback in thread to avoid blocking event loop
        await asyncio.to_thread(self.play_bytes, audio_data)

    def save_to_file(self, audio_data: bytes, filepath: str | Path) -> None:
        """Save audio bytes to a file.

        Args:
            audio_data: Audio data to save.
            filepath: Path where the audio file should be saved.

        Raises:
            ValueError: If no audio data provided.
            OSError: If file cannot be written.
        """
        if not audio_data:
            raise ValueError("No audio data provided")

        filepath = Path(filepath)

        try:
            filepath.parent.mkdir(parents=True, exist_ok=True)
            filepath.write_bytes(audio_data)
        except OSError as e:
            raise OSError(f"Failed to save audio to {filepath}: {e}") from e

    def _play_with_mixer(self, audio_data: bytes) -> None:
        pygame.mixer.music.load(io.BytesIO(audio_data))
        pygame.mixer.music.play()

        # Wait for playback to complete
        while pygame.mixer.music.get_busy():
            pygame.time.Clock().tick(10)

    def _play_with_commands(self, audio_data: bytes) -> None:
        with tempfile.NamedTemporaryFile(
            prefix="tts_", suffix=".mp3", delete=False
        ) as tmp:
            tmp.write(audio_data)
            audio_path = Path(tmp.name)

        for cmd in get_audio_commands(platform.system(), str(audio_path)):
            if shutil.which(cmd[0]) is None:
                continue
            try:
                result = subprocess.run(cmd, capture_output=True, check=False)
            except OSError as e:
                logger.debug(f"{cmd[0]} failed to start: {e}")
                continue
            if result.returncode == 0:
                audio_path.unlink(missing_ok=True)
                return
            logger.debug(f"{cmd[0]} exited with code {result.returncode}")

        raise PlaybackError(
            f"No audio player worked. File saved: {audio_path}", audio_path
        )
