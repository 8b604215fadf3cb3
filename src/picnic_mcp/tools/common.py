"""Common utilities for MCP tool registration.

Provides helpers that run Picnic client calls with consistent patterns.
"""

import asyncio
from collections.abc import Callable
from datetime import UTC, datetime
from types import SimpleNamespace
from typing import Any

from fastmcp import Context
from python_picnic_api2 import PicnicAPI


async def call_client(
    ctx: Context,
    deps: SimpleNamespace,
    *,
    log_message: str,
    call: Callable[[PicnicAPI], Any],
) -> Any:
    """Ensure the Picnic client is ready and run a blocking call against it.

    Args:
        ctx: FastMCP context.
        deps: Dependencies namespace with ``initialize_client`` and ``get_client``.
        log_message: Message reported to the MCP client before the call.
        call: Function receiving the authenticated client.

    Returns:
        Whatever ``call`` returns.

    """
    await ctx.info(log_message)
    await deps.initialize_client()
    client: PicnicAPI = deps.get_client()
    return await asyncio.to_thread(call, client)


def build_tool_response(section_name: str, data: Any) -> dict[str, Any]:
    """Build a standard tool response with metadata.

    Args:
        section_name: Name of the data section (e.g., "products", "cart").
        data: Payload returned by the Picnic API.

    Returns:
        Standard response dictionary with metadata.

    """
    return {
        "retrieved_at": datetime.now(UTC).isoformat(),
        section_name: data,
    }


def require_positive_count(count: int) -> int:
    """Return ``count`` or raise ``ValueError`` when it is below one."""
    if count < 1:
        msg = f"count must be at least 1, got {count}"
        raise ValueError(msg)
    return count


__all__ = ["build_tool_response", "call_client", "require_positive_count"]
