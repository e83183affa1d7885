"""Typer CLI definition for tts-cli."""

import asyncio
import logging
import sys
from pathlib import Path

import typer

from .audio.player import PlaybackError
from .config import load_config
from .core import clear_cache, get_cache_stats, list_available_voices, speak_text
from .doctor import check_system
from .formatting import format_cache_stats, format_text, format_voices
from .tts.errors import TTSAPIError, TTSNetworkError, TTSVoiceError

app = typer.Typer(help="Convert text to speech using Microsoft Edge voices")


def process_text_input(text: str | None) -> str | None:
    """Normalise text input, returning None when there is nothing to speak.

    Args:
        text: Text from the CLI argument, a file or stdin

    Returns:
        The text unchanged, or None if it is missing or whitespace only
    """
    if text is None or not text.strip():
        return None
    return text


def _fail(message: str, error: Exception, debug: bool, label: str) -> typer.Exit:
    if debug:
        typer.echo(f"Debug - {label}: {error!r}", err=True)
    else:
        typer.echo(f"Error: {message}", err=True)
    return typer.Exit(1)


@app.command()
def speak(
    ctx: typer.Context,
    text: str | None = typer.Argument(None, help="Text to convert to speech"),
    file: Path | None = typer.Option(None, "-f", "--file", help="Read text from file"),
    output: Path | None = typer.Option(
        None, "-o", "--output", "--save", help="Save to file instead of playing"
    ),
    voice: str | None = typer.Option(
        None, "-v", "--voice", help="Voice to use (default: en-US-AriaNeural)"
    ),
    rate: str | None = typer.Option(
        None, "--rate", help="Speech rate (e.g., +20%, -10%)"
    ),
    pitch: str | None = typer.Option(
        None, "--pitch", help="Voice pitch (e.g., +10Hz, -20Hz)"
    ),
    no_cache: bool = typer.Option(
        False, "--no-cache", help="Bypass the audio cache for this request"
    ),
    clear_cache_flag: bool = typer.Option(
        False, "--clear-cache", help="Delete all cached audio and exit"
    ),
    cache_stats: bool = typer.Option(
        False, "--cache-stats", help="Show cache location, file count and size"
    ),
    check: bool = typer.Option(False, "--check", help="Check system setup and exit"),
    list_voices: bool = typer.Option(
        False, "--list-voices", help="List all available voices and exit"
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Show verbose error messages and cache activity"
    ),
) -> None:
    """Convert text to speech using Microsoft Edge voices."""
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    config = load_config()
    cache_dir = config.cache.directory

    if clear_cache_flag:
        count = asyncio.run(clear_cache(cache_dir))
        typer.echo(f"🗑️  Cleared {count} cached audio files")
        raise typer.Exit(0)

    if cache_stats:
        stats = asyncio.run(get_cache_stats(cache_dir))
        typer.echo("📊 Cache statistics:")
        for line in format_cache_stats(stats):
            typer.echo(f"   {line}")
        raise typer.Exit(0)

    if check:
        typer.echo("🔍 Checking system setup...")
        section = None
        for result in check_system(cache_dir):
            if result.section != section:
                section = result.section
                typer.echo(f"\n{section}:")
            typer.echo(result.render())
        typer.echo("\n✨ System check complete!")
        raise typer.Exit(0)

    if list_voices:
        typer.echo("📋 Fetching voices...\n")
        try:
            voices = asyncio.run(list_available_voices())
        except Exception as e:
            raise _fail(
                "Failed to fetch voices", e, debug, "Failed to list voices"
            ) from None
        for line in format_voices(voices):
            typer.echo(line)
        raise typer.Exit(0)

    # Get text from argument, file, or stdin (in priority order)
    if text is None:
        if file:
            try:
                text = file.read_text()
            except FileNotFoundError as e:
                raise _fail(
                    f"File not found: {file}", e, debug, "File not found"
                ) from None
            except PermissionError as e:
                raise _fail(
                    f"Permission denied reading file: {file}",
                    e,
                    debug,
                    "Permission denied",
                ) from None
            except UnicodeDecodeError as e:
                raise _fail(
                    f"Unable to decode file as text: {file}", e, debug, "Decode error"
                ) from None
        elif not sys.stdin.isatty():
            text = sys.stdin.read().strip()

    output_text = process_text_input(text)
    if output_text is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)

    voice = voice or config.tts.voice
    rate = rate or config.tts.rate
    pitch = pitch or config.tts.pitch
    use_cache = config.cache.enabled and not no_cache

    typer.echo(f'🎙️  Converting: "{format_text(output_text)}"')
    typer.echo(f"   Voice: {voice}")
    if rate != "+0%":
        typer.echo(f"   Rate: {rate}")
    if pitch != "+0Hz":
        typer.echo(f"   Pitch: {pitch}")

    try:
        result = asyncio.run(
            speak_text(
                output_text,
                voice=voice,
                rate=rate,
                pitch=pitch,
                output_file=output,
                cache=use_cache,
                cache_dir=cache_dir,
            )
        )
    except TTSVoiceError as e:
        typer.echo(f"❌ Error: {e}", err=True)
        typer.echo("\n💡 Try: tts-cli --list-voices")
        raise typer.Exit(1) from None
    except TTSNetworkError as e:
        typer.echo(f"❌ Error: {e}", err=True)
        typer.echo("\n💡 Check internet connection")
        raise typer.Exit(1) from None
    except TTSAPIError as e:
        raise _fail(str(e), e, debug, "TTS service error") from None
    except PlaybackError as e:
        typer.echo(f"⚠️  {e}", err=True)
        raise typer.Exit(1) from None
    except OSError as e:
        raise _fail(
            f"Failed to save audio file: {e}", e, debug, "File system error"
        ) from None
    except ValueError as e:
        raise _fail(str(e), e, debug, "Invalid input") from None
    except Exception as e:
        raise _fail(
            "An unexpected error occurred", e, debug, "Unexpected error"
        ) from None

    source = " (from cache)" if result["cached"] else ""
    typer.echo(f"✅ Generated {result['bytes'] / 1024:.1f} KB{source}")
    if result["saved"]:
        typer.echo(f"💾 Saved to: {result['saved']}")
    else:
        typer.echo("✨ Done!")
