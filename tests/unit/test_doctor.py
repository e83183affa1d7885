"""Unit tests for system checks."""

from pathlib import Path
from unittest.mock import MagicMock, patch

from tts_cli import doctor


def test_render_symbols() -> None:
    assert doctor.CheckResult(doctor.OK, "fine").render() == "✅ fine"
    assert doctor.CheckResult(doctor.FAILED, "bad").render() == "❌ bad"
    assert doctor.CheckResult(doctor.WARNING, "hmm").render().startswith("⚠️")


def test_check_players_reports_each_player() -> None:
    """Test every platform player is reported found or missing."""
    with patch(
        "tts_cli.doctor.shutil.which",
        side_effect=lambda name: "/usr/bin/mpg123" if name == "mpg123" else None,
    ):
        results = doctor.check_players("Linux")

    assert [r.status for r in results] == [
        doctor.FAILED,
        doctor.FAILED,
        doctor.OK,
        doctor.FAILED,
    ]
    assert results[0].message == "ffplay not found"
    assert results[2].message == "mpg123"


def test_check_network_reachable() -> None:
    with patch("tts_cli.doctor.socket.create_connection", return_value=MagicMock()):
        result = doctor.check_network()

    assert result.status == doctor.OK


def test_check_network_unreachable_is_warning() -> None:
    """Test an unreachable service is a warning, not a failure."""
    with patch(
        "tts_cli.doctor.socket.create_connection", side_effect=OSError("no route")
    ):
        result = doctor.check_network()

    assert result.status == doctor.WARNING
    assert "might still work" in result.message


def test_check_cache_dir_states(tmp_path: Path) -> None:
    """Test existing, missing and blocked cache directories."""
    assert doctor.check_cache_dir(tmp_path).status == doctor.OK
    missing = doctor.check_cache_dir(tmp_path / "missing")
    assert missing.status == doctor.OK
    assert "created on first use" in missing.message

    blocker = tmp_path / "file"
    blocker.write_text("x")
    assert doctor.check_cache_dir(blocker).status == doctor.FAILED


def test_check_temp_dir_reports_free_space() -> None:
    result = doctor.check_temp_dir()

    assert result.status == doctor.OK
    assert "MB available" in result.message


def test_check_system_order(tmp_path: Path) -> None:
    """Test check_system runs the checks in display order."""
    with (
        patch(
            "tts_cli.doctor.check_mixer",
            return_value=doctor.CheckResult(doctor.OK, "m"),
        ),
        patch("tts_cli.doctor.check_players", return_value=[]),
        patch(
            "tts_cli.doctor.check_network",
            return_value=doctor.CheckResult(doctor.WARNING, "n"),
        ),
    ):
        results = doctor.check_system(tmp_path)

    assert [r.message for r in results][1:3] == ["m", "n"]
    assert results[0].message.startswith("Python: ")
    assert results[-1].section == "Cache"
