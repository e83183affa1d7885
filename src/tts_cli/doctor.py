"""System setup checks for ``tts-cli --check``."""

import platform
import shutil
import socket
import sys
import tempfile
from dataclasses import dataclass
from pathlib import Path

from .audio.player import AudioPlayer, get_audio_commands
from .providers.edge import SERVICE_HOST

OK = "ok"
FAILED = "failed"
WARNING = "warning"

_SYMBOLS = {OK: "✅", FAILED: "❌", WARNING: "⚠️ "}


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one system check."""

    status: str
    message: str
    section: str = ""

    def render(self) -> str:
        return f"{_SYMBOLS[self.status]} {self.message}"


def check_python() -> CheckResult:
    version = platform.python_version()
    return CheckResult(OK, f"Python: {version} ({sys.executable})", "Runtime")


def check_mixer() -> CheckResult:
    player = AudioPlayer()
    if player.mixer_available:
        return CheckResult(OK, "pygame mixer", "Audio players")
    return CheckResult(WARNING, "pygame mixer unavailable", "Audio players")


def check_players(system: str | None = None) -> list[CheckResult]:
    """Check which command-line audio players are on PATH."""
    system = system or platform.system()
    results = []
    for cmd in get_audio_commands(system, "audio.mp3"):
        name = cmd[0]
        if shutil.which(name):
            results.append(CheckResult(OK, name, "Audio players"))
        else:
            results.append(CheckResult(FAILED, f"{name} not found", "Audio players"))
    return results


def check_network(host: str = SERVICE_HOST, timeout: float = 3.0) -> CheckResult:
    """Check that the speech service accepts TCP connections on port 443."""
    try:
        with socket.create_connection((host, 443), timeout=timeout):
            pass
    except OSError:
        return CheckResult(
            WARNING,
            "Cannot reach TTS servers (might still work)",
            "Internet connection",
        )
    return CheckResult(OK, "Can reach Microsoft TTS servers", "Internet connection")


def check_temp_dir() -> CheckResult:
    temp_dir = Path(tempfile.gettempdir())
    try:
        usage = shutil.disk_usage(temp_dir)
    except OSError:
        return CheckResult(OK, f"{temp_dir} exists", "Temp directory")
    free_mb = usage.free / (1024 * 1024)
    return CheckResult(OK, f"{temp_dir} - {free_mb:.0f} MB available", "Temp directory")


def check_cache_dir(cache_dir: Path) -> CheckResult:
    if cache_dir.is_dir():
        return CheckResult(OK, f"{cache_dir}", "Cache")
    if cache_dir.exists():
        return CheckResult(FAILED, f"{cache_dir} is not a directory", "Cache")
    return CheckResult(OK, f"{cache_dir} (created on first use)", "Cache")


def check_system(cache_dir: Path) -> list[CheckResult]:
    """Run every system check in display order."""
    return [
        check_python(),
        check_mixer(),
        *check_players(),
        check_network(),
        check_temp_dir(),
        check_cache_dir(cache_dir),
    ]
