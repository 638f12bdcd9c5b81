"""
Item renderer for bootnav

Turns one Item plus its RenderContext into an HTML fragment: picks the
tag, assembles classes in a fixed order and adds the accessibility
attributes Bootstrap expects. Rendering is a pure function of its inputs.

Class order on links:
    1. variant link class ("nav-link" / "dropdown-item")
    2. state classes ("active" / "disabled")
    3. classes injected by the context (e.g. "dropdown-toggle")
    4. classes from Item.link_attributes
"""

from typing import Any, Dict, Optional

from ..models.item import Item, ItemKind
from ..models.context import RenderContext
from ..models.renderers import RendererSpec, RendererCategory
from .registry import RendererRegistry
from . import markup

ACTIVE_CLASS = "active"
DISABLED_CLASS = "disabled"
DIVIDER_CLASS = "dropdown-divider"
HEADER_CLASS = "dropdown-header"
TEXT_CLASS = "dropdown-item-text"


class ItemRenderer:
    """
    Renders single items by dispatching to the registered handler

    The built-in handlers are methods of this class and are registered
    into the registry on construction, without overwriting handlers the
    caller already registered under the same names.
    """

    def __init__(self, registry: Optional[RendererRegistry] = None) -> None:
        self.registry = registry if registry is not None else RendererRegistry()
        self.builtinRenderers_register()

    def builtinRenderers_register(self) -> None:
        """Register the built-in handler for every ItemKind"""
        builtins = [
            (ItemKind.LINK, self.link_render, "Nav or dropdown link; a button when there is no URL",
             ['<a class="nav-link" href="/">Home</a>']),
            (ItemKind.DIVIDER, self.divider_render, "Dropdown divider",
             ['<hr class="dropdown-divider">']),
            (ItemKind.HEADER, self.header_render, "Dropdown section header",
             ['<h6 class="dropdown-header">Section</h6>']),
            (ItemKind.TEXT, self.text_render, "Non-interactive dropdown text",
             ['<span class="dropdown-item-text">Signed in</span>']),
            (ItemKind.HTML, self.html_render, "Raw list content", ['<form>...</form>']),
        ]
        for kind, handler, description, examples in builtins:
            self.registry.register(
                RendererSpec(
                    name=kind.value,
                    category=RendererCategory.BUILTIN,
                    description=description,
                    handler=handler,
                    examples=examples,
                ),
                replace=False,
            )

    def render(self, item: Item, context: Optional[RenderContext] = None) -> str:
        """
        Render one item (without its wrapper)

        Args:
            item: Item to render
            context: Resolved state and enclosing variant; defaults to a plain nav

        Returns:
            HTML fragment

        Raises:
            ConfigurationError: If the item names an unknown renderer
        """
        context = context if context is not None else RenderContext()
        handler = self.registry.handler_resolve(item)
        return handler(item, context)

    def linkTag_get(self, item: Item) -> str:
        """``a`` for items with a URL, otherwise the item's tag or the fallback tag"""
        from ..config import appsettings

        if item.url is not None:
            return "a"
        return item.tag or markup.tagName_validate(appsettings.fallback_tag)

    def link_render(self, item: Item, context: RenderContext) -> str:
        """Render a link (or button) item"""
        style = context.style
        active = context.active or item.active
        tag = self.linkTag_get(item)

        caller = dict(item.link_attributes)
        caller_classes = caller.pop("class", None)

        attributes: Dict[str, Any] = {}
        if "id" in caller:
            attributes["id"] = caller.pop("id")
        elif "id" in context.extra_attributes:
            attributes["id"] = context.extra_attributes["id"]

        attributes["class"] = markup.classes_merge(
            style.link_class,
            ACTIVE_CLASS if active else None,
            DISABLED_CLASS if item.disabled else None,
            context.extra_classes,
            caller_classes,
        )

        if tag == "a":
            if not item.disabled:
                attributes["href"] = item.url
        elif tag == "button":
            attributes["type"] = "button"

        if style.toggle and "data-bs-toggle" not in context.extra_attributes:
            attributes["data-bs-toggle"] = style.toggle
        for name, value in context.extra_attributes.items():
            if name != "id":
                attributes[name] = value

        if active:
            attributes["aria-current"] = "page"
        if item.disabled:
            attributes["aria-disabled"] = "true"

        attributes.update(caller)
        return markup.tag_render(tag, item.label_encode(), attributes)

    def divider_render(self, item: Item, context: RenderContext) -> str:
        """Render ``<hr class="dropdown-divider">``"""
        return markup.tag_render("hr", "", self._fixedAttributes_make(item, DIVIDER_CLASS))

    def header_render(self, item: Item, context: RenderContext) -> str:
        """Render a dropdown header"""
        from ..config import appsettings

        tag = item.tag or markup.tagName_validate(appsettings.header_tag)
        return markup.tag_render(tag, item.label_encode(), self._fixedAttributes_make(item, HEADER_CLASS))

    def text_render(self, item: Item, context: RenderContext) -> str:
        """Render non-interactive dropdown text"""
        return markup.tag_render("span", item.label_encode(), self._fixedAttributes_make(item, TEXT_CLASS))

    def html_render(self, item: Item, context: RenderContext) -> str:
        """Pass raw list content through"""
        return item.label_encode()

    def _fixedAttributes_make(self, item: Item, base_class: str) -> Dict[str, Any]:
        return markup.attributes_merge({"class": [base_class]}, item.link_attributes)
