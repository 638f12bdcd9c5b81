"""
Render context passed from the list composer to item renderers
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple, TYPE_CHECKING

from .enums import MenuType, VariantStyle, variantStyle_get

if TYPE_CHECKING:
    from ..lib.ids import IdGenerator


@dataclass(frozen=True)
class RenderContext:
    """
    Everything an item renderer needs besides the item itself

    Attributes:
        menu_type: MenuType of the enclosing list
        active: Resolved active state for the item being rendered
        depth: Nesting depth (0 for the root collection)
        ids: IdGenerator for this render call
        extra_classes: Link classes appended after the state classes
                       (e.g. ``dropdown-toggle``)
        extra_attributes: Link attributes injected by the caller
                          (e.g. ``data-bs-toggle="dropdown"``)
    """
    menu_type: MenuType = MenuType.PLAIN
    active: bool = False
    depth: int = 0
    ids: Optional["IdGenerator"] = None
    extra_classes: Tuple[str, ...] = ()
    extra_attributes: Mapping[str, Any] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "extra_attributes", MappingProxyType(dict(self.extra_attributes)))

    @property
    def style(self) -> VariantStyle:
        """Class/attribute values for the enclosing list"""
        return variantStyle_get(self.menu_type)

    def with_extras(
        self, classes: Tuple[str, ...] = (), attributes: Optional[Mapping[str, Any]] = None
    ) -> "RenderContext":
        """Return a copy with more link classes and attributes appended"""
        merged = dict(self.extra_attributes)
        merged.update(attributes or {})
        return replace(
            self, extra_classes=self.extra_classes + tuple(classes), extra_attributes=merged
        )
