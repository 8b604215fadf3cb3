"""Entry point for the Picnic MCP server.

This module wires together the FastMCP app and registers tools. The Picnic
client itself lives in ``client.picnic_client``; tools reach it through a
dependency namespace so they can be tested without a network.

Registered tools:
- ``search_products``: search the Picnic catalog
- ``get_cart`` / ``add_to_cart`` / ``remove_from_cart``: manage the cart
- ``get_user`` / ``get_deliveries`` / ``get_delivery_slots``: account views
"""

import logging
import os
import signal
import sys
from types import SimpleNamespace

from fastmcp import FastMCP

from . import prompts
from .client.picnic_client import (
    ClientNotInitializedError,
    PicnicClientManager,
    get_client_manager,
    get_picnic_client,
    initialize_picnic_client,
    reset_picnic_client,
)
from .config import ConfigurationError, PicnicConfig, load_config
from .tools.account import register as register_account_tools
from .tools.cart import register as register_cart_tools
from .tools.catalog import register as register_catalog_tools

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(name)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger("picnic_mcp.server")

app = FastMCP(
    name="picnic-mcp",
    instructions="Expose tools that search products and manage the cart of a Picnic grocery account.",
)


# Explicit re-exports for public API stability (and to satisfy linters)
__all__ = [
    "ClientNotInitializedError",
    "ConfigurationError",
    "PicnicClientManager",
    "PicnicConfig",
    "app",
    "get_client_manager",
    "handle_interrupt",
    "main",
    "reset_picnic_client",
]


def _register_capabilities() -> None:
    """Import tool and prompt modules and register them with the app instance."""
    deps = SimpleNamespace(
        initialize_client=initialize_picnic_client,
        get_client=get_picnic_client,
    )
    register_catalog_tools(app, deps=deps)
    register_cart_tools(app, deps=deps)
    register_account_tools(app, deps=deps)
    prompts.register(app)


# Register all capabilities with the app instance (after function is defined)
_register_capabilities()


def handle_interrupt(signum: int, frame: object) -> None:  # noqa: ARG001
    """Handle keyboard interrupt gracefully."""
    logger.info("Received interrupt signal, shutting down...")
    sys.exit(0)


def main() -> None:
    """Entry point for the picnic-mcp console script."""
    signal.signal(signal.SIGINT, handle_interrupt)
    signal.signal(signal.SIGTERM, handle_interrupt)
    try:
        config = load_config()
    except ConfigurationError as exc:
        logger.error("%s", exc)  # noqa: TRY400
        sys.exit(1)

    if config.http_server_enabled:
        logger.info("Starting Picnic MCP server on http://%s:%d", config.http_host, config.http_port)
        app.run(transport="http", host=config.http_host, port=config.http_port)
    else:
        app.run()


if __name__ == "__main__":
    main()
