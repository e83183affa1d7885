"""Unit tests for ProviderRegistry."""

import pytest

from tts_cli.providers import DEFAULT_PROVIDER, ProviderRegistry
from tts_cli.providers.edge import EdgeTTSProvider


def test_edge_is_registered_by_default() -> None:
    """Test the edge provider is available under its name."""
    assert DEFAULT_PROVIDER == "edge"
    assert ProviderRegistry.get("edge") is EdgeTTSProvider
    assert "edge" in ProviderRegistry.names()


def test_unknown_provider_lists_available() -> None:
    """Test unknown names raise KeyError naming the registered providers."""
    with pytest.raises(KeyError, match="Available providers: .*edge"):
        ProviderRegistry.get("nonexistent")


def test_get_instance_is_cached() -> None:
    """Test one instance is reused per provider name."""
    assert ProviderRegistry.get_instance("edge") is ProviderRegistry.get_instance(
        "edge"
    )
