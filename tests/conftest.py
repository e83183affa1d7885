"""Pytest configuration and fixtures for tts-cli tests."""

import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tts_cli import config
from tts_cli.providers.base import TTSProvider
from tts_cli.tts.models import VoiceInfo


@pytest.fixture(autouse=True)
def isolate_config(tmp_path: Path, monkeypatch) -> Generator[None]:
    """Keep every test away from the user's real config and cache."""
    monkeypatch.setattr(config, "CONFIG_DIR", tmp_path / "config")
    monkeypatch.setattr(config, "CONFIG_PATH", tmp_path / "config" / "config.toml")
    for name in (
        "TTS_CLI_VOICE",
        "TTS_CLI_RATE",
        "TTS_CLI_PITCH",
        "TTS_CLI_NO_CACHE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TTS_CLI_CACHE_DIR", str(tmp_path / "default-cache"))
    config.reset_config()
    yield
    config.reset_config()


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    """Cache root that does not exist yet."""
    return tmp_path / "cache" / "tts-cli"


class FakeProvider(TTSProvider):
    """Provider that returns deterministic audio without network access."""

    name = "fake"

    def __init__(self, audio: bytes = b"ID3fake-mp3-audio") -> None:
        self.audio = audio
        self.calls: list[tuple[str, str, str, str]] = []

    async def synthesize(self, text: str, voice: str, rate: str, pitch: str) -> bytes:
        self.calls.append((text, voice, rate, pitch))
        return self.audio

    async def list_voices(self) -> list[VoiceInfo]:
        return [
            VoiceInfo("en-US-AriaNeural", "en-US", "Female"),
            VoiceInfo("en-GB-SoniaNeural", "en-GB", "Female"),
            VoiceInfo("de-DE-KatjaNeural", "de-DE", "Female"),
        ]


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()
