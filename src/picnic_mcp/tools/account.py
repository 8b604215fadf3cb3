"""MCP tools: get_user, get_deliveries, get_delivery_slots.

Read-only views of the authenticated Picnic account.
"""

# pyright: reportUnusedFunction=false

from types import SimpleNamespace
from typing import Any

from fastmcp import Context, FastMCP

from .common import build_tool_response, call_client


def register(app: FastMCP, *, deps: SimpleNamespace) -> None:
    """Register the account tools on the provided app instance.

    Args:
        app: The FastMCP application instance to add the tools to.
        deps: Dependencies namespace with ``initialize_client`` and ``get_client``.

    """

    @app.tool(
        name="get_user",
        description="Return the Picnic account profile as JSON.",
        annotations={
            "title": "Show account",
            "readOnlyHint": True,
        },
    )
    async def get_user(ctx: Context) -> dict[str, Any]:
        user = await call_client(
            ctx,
            deps,
            log_message="Fetching Picnic account details.",
            call=lambda client: client.get_user(),
        )
        return build_tool_response("user", user)

    @app.tool(
        name="get_deliveries",
        description="Return past and upcoming Picnic deliveries as JSON.",
        annotations={
            "title": "List deliveries",
            "readOnlyHint": True,
        },
    )
    async def get_deliveries(ctx: Context) -> dict[str, Any]:
        deliveries = await call_client(
            ctx,
            deps,
            log_message="Listing Picnic deliveries.",
            call=lambda client: client.get_deliveries(),
        )
        return build_tool_response("deliveries", deliveries)

    @app.tool(
        name="get_delivery_slots",
        description="Return the delivery slots currently offered for the cart as JSON.",
        annotations={
            "title": "List delivery slots",
            "readOnlyHint": True,
        },
    )
    async def get_delivery_slots(ctx: Context) -> dict[str, Any]:
        slots = await call_client(
            ctx,
            deps,
            log_message="Listing Picnic delivery slots.",
            call=lambda client: client.get_delivery_slots(),
        )
        return build_tool_response("delivery_slots", slots)


__all__ = ["register"]
