"""MCP tool: search_products.

Searches the Picnic catalog for the configured market.
"""

# pyright: reportUnusedFunction=false

from types import SimpleNamespace
from typing import Any

from fastmcp import Context, FastMCP

from .common import build_tool_response, call_client


def register(app: FastMCP, *, deps: SimpleNamespace) -> None:
    """Register the search_products tool on the provided app instance.

    Args:
        app: The FastMCP application instance to add the tool to.
        deps: Dependencies namespace with ``initialize_client`` and ``get_client``.

    """

    @app.tool(
        name="search_products",
        description="Search the Picnic catalog and return matching products as JSON.",
        annotations={
            "title": "Search products",
            "readOnlyHint": True,
        },
    )
    async def search_products(ctx: Context, query: str) -> dict[str, Any]:
        if not query.strip():
            msg = "query must not be empty"
            raise ValueError(msg)
        results = await call_client(
            ctx,
            deps,
            log_message=f"Searching Picnic products for {query!r}.",
            call=lambda client: client.search(query),
        )
        return build_tool_response("products", results)


__all__ = ["register"]
