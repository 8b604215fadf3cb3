"""MCP tools: get_cart, add_to_cart, remove_from_cart."""

# pyright: reportUnusedFunction=false

from types import SimpleNamespace
from typing import Any

from fastmcp import Context, FastMCP

from .common import build_tool_response, call_client, require_positive_count


def register(app: FastMCP, *, deps: SimpleNamespace) -> None:
    """Register the cart tools on the provided app instance.

    Args:
        app: The FastMCP application instance to add the tools to.
        deps: Dependencies namespace with ``initialize_client`` and ``get_client``.

    """

    @app.tool(
        name="get_cart",
        description="Return the current Picnic shopping cart as JSON.",
        annotations={
            "title": "Show cart",
            "readOnlyHint": True,
        },
    )
    async def get_cart(ctx: Context) -> dict[str, Any]:
        cart = await call_client(
            ctx,
            deps,
            log_message="Fetching Picnic cart.",
            call=lambda client: client.get_cart(),
        )
        return build_tool_response("cart", cart)

    @app.tool(
        name="add_to_cart",
        description="Add a product to the Picnic cart and return the updated cart as JSON.",
        annotations={
            "title": "Add product to cart",
            "readOnlyHint": False,
        },
    )
    async def add_to_cart(ctx: Context, product_id: str, count: int = 1) -> dict[str, Any]:
        require_positive_count(count)
        cart = await call_client(
            ctx,
            deps,
            log_message=f"Adding {count} x {product_id} to Picnic cart.",
            call=lambda client: client.add_product(product_id, count),
        )
        return build_tool_response("cart", cart)

    @app.tool(
        name="remove_from_cart",
        description="Remove a product from the Picnic cart and return the updated cart as JSON.",
        annotations={
            "title": "Remove product from cart",
            "readOnlyHint": False,
            "destructiveHint": True,
        },
    )
    async def remove_from_cart(ctx: Context, product_id: str, count: int = 1) -> dict[str, Any]:
        require_positive_count(count)
        cart = await call_client(
            ctx,
            deps,
            log_message=f"Removing {count} x {product_id} from Picnic cart.",
            call=lambda client: client.remove_product(product_id, count),
        )
        return build_tool_response("cart", cart)


__all__ = ["register"]
