"""TTS (Text-to-Speech) package for tts-cli.

This package provides the speech models, errors and the synthesis pipeline.
"""

from .errors import TTSAPIError, TTSError, TTSNetworkError, TTSVoiceError
from .models import SpeechSettings, VoiceInfo

__all__ = [
    "SpeechSettings",
    "TTSAPIError",
    "TTSError",
    "TTSNetworkError",
    "TTSVoiceError",
    "VoiceInfo",
]
