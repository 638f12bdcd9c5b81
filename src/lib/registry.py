"""
Renderer registry for bootnav

Maps renderer names to RendererSpec objects. Built-in renderers are keyed
by ItemKind value ("link", "divider", ...); callers register extra
renderers under their own names and select them with Item.renderer.
"""

from typing import Callable, Dict, List, Optional, TYPE_CHECKING

from ..models.renderers import RendererSpec, RendererCategory, reserved_is
from .errors import ConfigurationError

if TYPE_CHECKING:
    from ..models.item import Item


class RendererRegistry:
    """
    Registry of renderer specifications and handlers

    Example:
        >>> registry = RendererRegistry()
        >>> registry.register(RendererSpec(
        ...     name="badge",
        ...     category=RendererCategory.CUSTOM,
        ...     description="Link with a counter badge",
        ...     handler=badge_render,
        ... ))
        >>> Item.link("Inbox", "/inbox", renderer="badge")
    """

    def __init__(self) -> None:
        """Initialize an empty registry (built-ins are added by ItemRenderer)"""
        self.specs: Dict[str, RendererSpec] = {}

    def register(self, spec: RendererSpec, replace: bool = True) -> None:
        """
        Register a renderer specification

        Args:
            spec: Specification to register
            replace: Overwrite an existing registration with the same name

        Raises:
            ConfigurationError: If a custom renderer claims a built-in name
        """
        if spec.category == RendererCategory.CUSTOM and reserved_is(spec.name):
            raise ConfigurationError(
                f"Renderer name '{spec.name}' is reserved for a built-in item kind."
            )
        for name in [spec.name, *spec.aliases]:
            if replace or name not in self.specs:
                self.specs[name] = spec

    def get(self, name: str) -> Optional[Callable]:
        """
        Get renderer handler by name

        Args:
            name: Renderer name to look up

        Returns:
            Handler function or None if not found
        """
        spec = self.spec_get(name)
        return spec.handler if spec else None

    def spec_get(self, name: str) -> Optional[RendererSpec]:
        """Get full renderer specification by name"""
        if name in self.specs:
            return self.specs[name]

        for spec in self.specs.values():
            if spec.matches(name):
                return spec

        return None

    def handler_resolve(self, item: "Item") -> Callable:
        """
        Pick the handler for an item: its custom renderer, else its kind's.

        Raises:
            ConfigurationError: If the named renderer is not registered
        """
        name = item.renderer or item.kind.value
        handler = self.get(name)
        if handler is None:
            raise ConfigurationError(f"Unknown renderer '{name}'.")
        return handler

    def renderers_listByCategory(self, category: RendererCategory) -> List[RendererSpec]:
        """Get all renderers in a category (each spec once)"""
        unique: List[RendererSpec] = []
        for spec in self.specs.values():
            if spec.category == category and spec not in unique:
                unique.append(spec)
        return unique
