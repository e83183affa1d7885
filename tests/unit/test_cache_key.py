"""Unit tests for cache key derivation and entry paths."""

import hashlib
import re
from pathlib import Path

from tts_cli.cache import AudioCache, derive_key

HEX_64 = re.compile(r"^[0-9a-f]{64}$")

BASE = ("Hello, test world!", "en-US-AriaNeural", "+0%", "+0Hz")


class TestDeriveKey:
    """Test deterministic key derivation."""

    def test_same_inputs_give_same_key(self) -> None:
        """Test that repeated calls produce identical keys."""
        assert derive_key(*BASE) == derive_key(*BASE) == derive_key(*BASE)

    def test_matches_sha256_of_pipe_joined_fields(self) -> None:
        """Test the exact layout so existing cache directories stay valid."""
        expected = hashlib.sha256(
            b"Hello, test world!|en-US-AriaNeural|+0%|+0Hz"
        ).hexdigest()
        assert derive_key(*BASE) == expected

    def test_each_field_changes_key(self) -> None:
        """Test that changing any single field changes the key."""
        base_key = derive_key(*BASE)
        variants = [
            ("Different text", *BASE[1:]),
            (BASE[0], "en-GB-SoniaNeural", *BASE[2:]),
            (*BASE[:2], "+20%", BASE[3]),
            (*BASE[:3], "+10Hz"),
        ]
        keys = {derive_key(*variant) for variant in variants}
        assert base_key not in keys
        assert len(keys) == len(variants)

    def test_whitespace_is_significant(self) -> None:
        """Test that fields are not trimmed or normalised."""
        assert derive_key("hello", "v", "+0%", "+0Hz") != derive_key(
            "hello ", "v", "+0%", "+0Hz"
        )
        assert derive_key("hello", "v", "+0%", "+0Hz") != derive_key(
            "Hello", "v", "+0%", "+0Hz"
        )

    def test_format_is_64_lowercase_hex(self) -> None:
        """Test key format for ordinary, empty and unicode input."""
        cases = [
            BASE,
            ("", "", "", ""),
            ("", "en-US-AriaNeural", "+0%", "+0Hz"),
            ("日本語のテキスト 🎙️", "ja-JP-NanamiNeural", "-10%", "+5Hz"),
            ("very long text " * 500, "v", "+0%", "+0Hz"),
        ]
        for fields in cases:
            assert HEX_64.match(derive_key(*fields))

    def test_separator_is_not_escaped(self) -> None:
        """Test that moving a "|" across a field boundary keeps the key."""
        assert derive_key("a|b", "c", "+0%", "+0Hz") == derive_key(
            "a", "b|c", "+0%", "+0Hz"
        )


class TestPathFor:
    """Test entry path resolution."""

    def test_path_is_key_with_mp3_suffix(self, tmp_path: Path) -> None:
        """Test that entries live directly in the cache root."""
        cache = AudioCache(tmp_path)
        key = derive_key(*BASE)

        assert cache.path_for(key) == tmp_path / f"{key}.mp3"

    def test_path_for_does_not_touch_filesystem(self, tmp_path: Path) -> None:
        """Test that resolving a path does not create the cache root."""
        cache = AudioCache(tmp_path / "missing")
        cache.path_for("abc")

        assert not (tmp_path / "missing").exists()

    def test_default_cache_dir_from_environment(
        self, tmp_path: Path, monkeypatch
    ) -> None:
        """Test that TTS_CLI_CACHE_DIR sets the default cache root."""
        monkeypatch.setenv("TTS_CLI_CACHE_DIR", str(tmp_path / "env-cache"))

        assert AudioCache().cache_dir == tmp_path / "env-cache"

    def test_default_cache_dir_under_home(self, monkeypatch) -> None:
        """Test the default of ~/.cache/tts-cli."""
        monkeypatch.delenv("TTS_CLI_CACHE_DIR", raising=False)

        assert AudioCache().cache_dir == Path.home() / ".cache" / "tts-cli"
