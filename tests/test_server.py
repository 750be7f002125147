"""Tests for the process entry point."""

import socket

import pytest

from catalog_api import server


def test_port_available_for_free_port() -> None:
    """Test a port nobody holds can be bound."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]

    assert server.port_available("127.0.0.1", port) is True


def test_port_available_for_busy_port() -> None:
    """Test a bound port is reported busy."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        sock.listen()
        port = sock.getsockname()[1]

        assert server.port_available("127.0.0.1", port) is False


class TestSelectPort:
    """Tests for port selection."""

    def test_keeps_configured_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(server, "port_available", lambda host, port: True)

        assert server.select_port("0.0.0.0", 3000, 3001) == 3000

    def test_moves_to_fallback_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(server, "port_available", lambda host, port: False)

        assert server.select_port("0.0.0.0", 3000, 3001) == 3001


def test_run_starts_uvicorn(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test run hands the selected port to uvicorn."""
    calls = []
    monkeypatch.setattr(server, "select_port", lambda host, port, fallback: 3001)
    monkeypatch.setattr(
        server.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs))
    )

    server.run()

    assert len(calls) == 1
    app, kwargs = calls[0]
    assert app == "catalog_api.main:app"
    assert kwargs["port"] == 3001
