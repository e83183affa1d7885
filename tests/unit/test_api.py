"""Unit tests for API module logic."""

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from tts_cli.api import speak


class TestSpeakParameterHandling:
    """Test speak function parameter processing logic."""

    @pytest.mark.asyncio
    @patch("tts_cli.api.speak_text")
    async def test_speak_converts_path_to_string(
        self, mock_speak_text: AsyncMock
    ) -> None:
        """Test speak converts Path object to string for output parameter."""
        mock_speak_text.return_value = {}
        test_path = Path("/nonexistent/test.mp3")

        result = await speak(text="test", output=test_path)

        mock_speak_text.assert_called_once_with(
            text="test",
            voice="en-US-AriaNeural",
            rate="+0%",
            pitch="+0Hz",
            output_file=str(test_path),
            cache=True,
            cache_dir=None,
        )
        assert result is None

    @pytest.mark.asyncio
    @patch("tts_cli.api.speak_text")
    async def test_speak_returns_saved_bytes(
        self, mock_speak_text: AsyncMock, tmp_path: Path
    ) -> None:
        """Test the saved file's bytes are returned."""
        target = tmp_path / "out.mp3"

        async def fake_speak_text(**kwargs):
            Path(kwargs["output_file"]).write_bytes(b"mp3")
            return {}

        mock_speak_text.side_effect = fake_speak_text

        assert await speak("test", output=target) == b"mp3"

    @pytest.mark.asyncio
    @patch("tts_cli.api.speak_text")
    async def test_speak_without_output_returns_none(
        self, mock_speak_text: AsyncMock
    ) -> None:
        mock_speak_text.return_value = {}

        assert await speak("test", voice="en-GB-SoniaNeural", cache=False) is None
        assert mock_speak_text.call_args.kwargs["cache"] is False
        assert mock_speak_text.call_args.kwargs["output_file"] is None


def test_package_exposes_speak() -> None:
    """Test lazy attribute access on the package."""
    import tts_cli

    assert tts_cli.speak is speak
    with pytest.raises(AttributeError):
        tts_cli.nonexistent  # noqa: B018
