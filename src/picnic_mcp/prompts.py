"""MCP prompts for Picnic grocery workflows.

Exposes common shopping workflows as prompts.
"""

# pyright: reportUnusedFunction=false

from fastmcp import FastMCP


def register(app: FastMCP) -> None:
    """Register prompts on the provided app instance."""

    @app.prompt(
        name="Plan Weekly Groceries",
        description="Create a prompt to plan a week of groceries and fill the Picnic cart.",
        tags={"planning", "cart"},
    )
    def plan_weekly_groceries(household_size: int = 2, dietary_notes: str = "") -> str:
        prompt = f"Please plan a week of meals for a household of {household_size}."
        if dietary_notes:
            prompt += f" Dietary notes: '{dietary_notes}'."
        prompt += (
            " Use the search_products tool to find the ingredients on Picnic "
            "and add them with add_to_cart. Summarize the cart with get_cart when done."
        )
        return prompt

    @app.prompt(
        name="Review Cart",
        description="Create a prompt to review the current Picnic cart.",
        tags={"review", "cart"},
    )
    def review_cart() -> str:
        return (
            "Please review my current Picnic cart using the get_cart tool. "
            "Point out duplicates, missing staples, and cheaper alternatives. "
            "Check get_delivery_slots for the next available delivery."
        )


__all__ = ["register"]
