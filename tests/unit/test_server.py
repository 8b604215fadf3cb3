"""Unit tests for the Picnic MCP server entry point."""

import signal
from unittest.mock import MagicMock, patch

import pytest

from picnic_mcp import server
from picnic_mcp.config import ConfigurationError, PicnicConfig


def _config(**overrides: str) -> PicnicConfig:
    return PicnicConfig.from_mapping({"PICNIC_USERNAME": "u", "PICNIC_PASSWORD": "p", **overrides})


def test_app_name() -> None:
    """The FastMCP app should be named after the project."""
    assert server.app.name == "picnic-mcp"


def test_main_runs_stdio_by_default() -> None:
    """Without ENABLE_HTTP_SERVER the app should run over stdio."""
    with (
        patch.object(server, "load_config", return_value=_config()),
        patch.object(server, "app") as mock_app,
        patch.object(server.signal, "signal") as mock_signal,
    ):
        server.main()

    mock_app.run.assert_called_once_with()
    mock_signal.assert_any_call(signal.SIGINT, server.handle_interrupt)
    mock_signal.assert_any_call(signal.SIGTERM, server.handle_interrupt)


def test_main_runs_http_when_enabled() -> None:
    """ENABLE_HTTP_SERVER=true should run the HTTP transport on the configured address."""
    config = _config(ENABLE_HTTP_SERVER="true", HTTP_HOST="0.0.0.0", HTTP_PORT="8080")
    with (
        patch.object(server, "load_config", return_value=config),
        patch.object(server, "app") as mock_app,
        patch.object(server.signal, "signal"),
    ):
        server.main()

    mock_app.run.assert_called_once_with(transport="http", host="0.0.0.0", port=8080)


def test_main_exits_on_invalid_config() -> None:
    """An invalid configuration should stop the process before serving."""
    error = ConfigurationError({"password": "Field required"})
    with (
        patch.object(server, "load_config", side_effect=error),
        patch.object(server, "app") as mock_app,
        patch.object(server.signal, "signal"),
        pytest.raises(SystemExit) as exc_info,
    ):
        server.main()

    assert exc_info.value.code == 1
    mock_app.run.assert_not_called()


def test_handle_interrupt_exits() -> None:
    """Signal handler should exit cleanly."""
    with pytest.raises(SystemExit) as exc_info:
        server.handle_interrupt(signal.SIGINT, MagicMock())
    assert exc_info.value.code == 0
