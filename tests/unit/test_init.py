r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import netclient


def test_package_version_is_string() -> None:
    """Test that __version__ is a non-empty string."""
    assert isinstance(netclient.__version__, str)
    assert len(netclient.__version__) > 0


def test_package_version_format() -> None:
    # Should have at least one dot (e.g., "0.0.0" or "0.1.0")
    assert "." in netclient.__version__


def test_all_exports_defined() -> None:
    """Test that all items in __all__ are defined in the module."""
    for name in netclient.__all__:
        assert hasattr(netclient, name), f"{name} is in __all__ but not defined in module"


def test_all_exports_count() -> None:
    # 2 clients + 1 config + 4 exceptions + 1 response + 1 verb + 1 version = 10
    assert len(netclient.__all__) == 10


def test_exceptions_share_base_class() -> None:
    assert issubclass(netclient.PropagatedFailure, netclient.NetworkClientError)
    assert issubclass(netclient.ExhaustedRetries, netclient.NetworkClientError)
    assert issubclass(netclient.UnsupportedOperationError, netclient.NetworkClientError)
