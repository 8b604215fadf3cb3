"""Unit tests for MCP prompts."""

from collections.abc import Callable
from typing import Any

from picnic_mcp import prompts


class _FakeApp:
    """Minimal stand-in for FastMCP app to capture registered prompts."""

    def __init__(self) -> None:
        self.prompts: dict[str, Callable[..., str]] = {}

    def prompt(self, *, name: str, description: str, tags: set[str] | None = None) -> Callable[[Callable[..., str]], Any]:
        def _decorator(func: Callable[..., str]) -> Callable[..., str]:
            _ = (description, tags)
            self.prompts[name] = func
            return func

        return _decorator


def _registered() -> dict[str, Callable[..., str]]:
    app = _FakeApp()
    prompts.register(app)  # type: ignore[arg-type]
    return app.prompts


def test_register_prompts() -> None:
    """Test that prompts are registered with the app."""
    assert set(_registered()) == {"Plan Weekly Groceries", "Review Cart"}


def test_plan_weekly_groceries_defaults() -> None:
    """The planning prompt should mention the household and the cart tools."""
    result = _registered()["Plan Weekly Groceries"]()

    assert "household of 2" in result
    assert "search_products" in result
    assert "add_to_cart" in result
    assert "Dietary notes" not in result


def test_plan_weekly_groceries_with_notes() -> None:
    """Dietary notes should be included when given."""
    result = _registered()["Plan Weekly Groceries"](household_size=4, dietary_notes="vegetarian")

    assert "household of 4" in result
    assert "vegetarian" in result


def test_review_cart_prompt() -> None:
    """The review prompt should point at the cart and delivery slot tools."""
    result = _registered()["Review Cart"]()

    assert "get_cart" in result
    assert "get_delivery_slots" in result
