"""
Dropdown sub-renderer for bootnav

Renders an item that owns a nested ItemCollection as a toggle plus a
``<ul class="dropdown-menu">``. The menu goes back through the list
composer, so nested dropdowns recurse with no depth limit.
"""

from typing import Optional, TYPE_CHECKING

from ..models.enums import MenuType
from ..models.item import Item
from ..models.context import RenderContext
from .errors import ConfigurationError
from .log import LOG

if TYPE_CHECKING:
    from .composer import ActiveState, ListComposer

TOGGLE_CLASS = "dropdown-toggle"
TOGGLE_COMPONENT = "dropdown"


class DropdownRenderer:
    """Toggle + menu markup for items with a dropdown"""

    def __init__(self, composer: "ListComposer") -> None:
        self.composer = composer

    def directionClass_get(self, item: Item, context: RenderContext) -> str:
        """
        Class for the element wrapping toggle and menu

        The item's own direction wins; otherwise "dropdown" in a nav and
        "dropend" for a submenu inside another dropdown menu.
        """
        if item.direction is not None:
            return item.direction.value
        if context.menu_type is MenuType.DROPDOWN:
            return "dropend"
        return "dropdown"

    def toggleContext_make(self, item: Item, context: RenderContext) -> RenderContext:
        """Context for rendering the toggle through the item renderer"""
        attributes = {
            "data-bs-toggle": TOGGLE_COMPONENT,
            "aria-expanded": "true" if context.active or item.active else "false",
        }
        if self.composer.renderer.linkTag_get(item) == "a":
            attributes["role"] = "button"
        return context.with_extras(classes=(TOGGLE_CLASS,), attributes=attributes)

    def render(self, item: Item, context: RenderContext, state: "ActiveState") -> Optional[str]:
        """
        Render toggle and menu (without the outer wrapper)

        Args:
            item: Item whose dropdown is set
            context: Context of the item within its own list
            state: Resolved active state of the nested collection

        Returns:
            Toggle and menu markup, or None when the menu has no visible
            items (the caller then renders the item as a plain link)

        Raises:
            ConfigurationError: If the toggle label is empty
        """
        if item.dropdown is None:
            return None

        menu = self.composer.menu_render(item.dropdown, state, context.ids, context.depth + 1)
        if not menu:
            LOG(f"Dropdown '{item.label}' has no visible items, rendering as link", level=3)
            return None

        if not item.label.strip():
            raise ConfigurationError("A dropdown toggle requires a non-empty label.")

        toggle = self.composer.renderer.render(item, self.toggleContext_make(item, context))
        separator = self.composer.separator
        return f"{separator}{toggle}{separator}{menu}{separator}"
