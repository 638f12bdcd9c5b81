"""
Renderer specification and metadata models

Defines the structure and categories of item renderers for the
RendererRegistry: the built-in renderer per ItemKind plus any custom
renderers a caller registers.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Callable, List, Set

from .item import ItemKind


class RendererCategory(Enum):
    """
    Categories of item renderers

    Used for organization and listing.
    """
    BUILTIN = "builtin"    # one per ItemKind
    CUSTOM = "custom"      # registered by the caller, selected with Item.renderer


@dataclass
class RendererSpec:
    """
    Specification for an item renderer

    Attributes:
        name: Renderer name (an ItemKind value for built-ins)
        category: Category for organization
        description: Human-readable description
        handler: Render function (item, context) -> str
        examples: Example markup strings
        aliases: Alternative names for the renderer
    """
    name: str
    category: RendererCategory
    description: str
    handler: Callable
    examples: List[str] = field(default_factory=list)
    aliases: List[str] = field(default_factory=list)

    def matches(self, renderer_name: str) -> bool:
        """
        Check if this spec handles a renderer name

        Args:
            renderer_name: Name to check

        Returns:
            True if the name is this spec's name or one of its aliases
        """
        return renderer_name == self.name or renderer_name in self.aliases


# Names reserved for the built-in ItemKind renderers
RESERVED_RENDERERS: Set[str] = {kind.value for kind in ItemKind}


def reserved_is(renderer_name: str) -> bool:
    """Check if a renderer name is reserved for a built-in kind"""
    return renderer_name in RESERVED_RENDERERS
