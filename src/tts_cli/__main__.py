"""Entry point for running tts-cli as a module."""

from .cli import app


def main() -> None:
    """Main entry point for the tts-cli CLI application."""
    app()


if __name__ == "__main__":
    main()
