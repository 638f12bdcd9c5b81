"""
ItemCollection model: the nav (or dropdown menu) itself

An ordered tuple of Items plus the settings that control how the list is
wrapped, classed and which item counts as active.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Iterator, List, Mapping, Optional, Tuple, Union

from ..lib import markup
from ..lib.errors import ConfigurationError
from .enums import MenuType, NavStyle, Size, enum_coerce
from .item import Item, ItemWrapper

CONTAINER_TAGS = {"ul", "ol", "nav", "div", "menu"}

ActiveMatcher = Union[int, str, None]


def _style_coerce(style: Union[NavStyle, str]) -> str:
    if isinstance(style, NavStyle):
        return style.value
    if isinstance(style, str) and style.strip().upper().replace("-", "_") in NavStyle.__members__:
        return NavStyle.__members__[style.strip().upper().replace("-", "_")].value
    if isinstance(style, str) and style.strip():
        return style.strip()
    raise ConfigurationError(
        f"Nav style must be a NavStyle name or a non-empty class string, got {style!r}."
    )


@dataclass(frozen=True)
class ItemCollection:
    """
    Ordered, renderable group of Items

    Attributes:
        items: Items in declaration order
        tag: Container tag (ul, ol, nav, div or menu)
        variant: MenuType selecting the container/link classes
        vertical: Breakpoint from which the nav stacks vertically
        active_matcher: Index (declaration order) or URL of the current item
        activate_parents: Mark dropdown owners active when a descendant is active
        default_item_wrapper: True for the standard wrapper, False for none,
                              or a custom ItemWrapper
        attributes: Container attributes; classes are appended last
        styles: Extra container classes (NavStyle members or class strings)
        tab_content_attributes: Attributes for the ``tab-content`` block
        render_content: Append the ``tab-content`` block after the nav; turn off
                        to place it elsewhere with ``ListComposer.tabContent_render``
        auto_id: Give the container a generated ``id`` when its attributes have none

    Collections are compared by value but are not hashable, since their
    attribute maps are read-only views of plain dicts.

    Example:
        >>> nav = ItemCollection.of(
        ...     Item.link("Home", "/"),
        ...     Item.link("Orders", "/orders"),
        ... ).tabs().with_activeMatcher("/orders")
    """
    items: Tuple[Item, ...] = ()
    tag: str = "ul"
    variant: MenuType = MenuType.PLAIN
    vertical: Optional[Size] = None
    active_matcher: ActiveMatcher = None
    activate_parents: bool = False
    default_item_wrapper: Union[ItemWrapper, bool] = True
    attributes: Mapping[str, Any] = field(default_factory=dict)
    styles: Tuple[str, ...] = ()
    tab_content_attributes: Mapping[str, Any] = field(default_factory=dict)
    render_content: bool = True
    auto_id: bool = False

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        items = tuple(self.items)
        for item in items:
            if not isinstance(item, Item):
                raise ConfigurationError(
                    f"Collection items must be Item instances, got {type(item).__name__}."
                )
        object.__setattr__(self, "items", items)
        object.__setattr__(self, "tag", markup.tagName_validate(self.tag, CONTAINER_TAGS))
        object.__setattr__(self, "variant", enum_coerce(MenuType, self.variant, "variant"))
        if self.vertical is not None:
            object.__setattr__(self, "vertical", enum_coerce(Size, self.vertical, "size"))
        if isinstance(self.active_matcher, bool) or not isinstance(
            self.active_matcher, (int, str, type(None))
        ):
            raise ConfigurationError(
                f"Active item must be an index, a URL or None, got {self.active_matcher!r}."
            )
        if not isinstance(self.default_item_wrapper, (bool, ItemWrapper)):
            raise ConfigurationError("Default item wrapper must be a bool or an ItemWrapper.")
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))
        object.__setattr__(
            self, "tab_content_attributes", MappingProxyType(dict(self.tab_content_attributes))
        )
        object.__setattr__(self, "styles", tuple(_style_coerce(style) for style in self.styles))

    @classmethod
    def of(cls, *items: Item, **options: Any) -> "ItemCollection":
        """Build a collection from positional items"""
        return cls(items=items, **options)

    # ------------------------------------------------------------------
    # Copy-on-write helpers
    # ------------------------------------------------------------------

    def with_items(self, *items: Item) -> "ItemCollection":
        return replace(self, items=items)

    def items_add(self, *items: Item) -> "ItemCollection":
        return replace(self, items=self.items + tuple(items))

    def with_tag(self, tag: str) -> "ItemCollection":
        return replace(self, tag=tag)

    def with_variant(self, variant: Union[MenuType, str]) -> "ItemCollection":
        return replace(self, variant=variant)

    def plain(self) -> "ItemCollection":
        return self.with_variant(MenuType.PLAIN)

    def tabs(self) -> "ItemCollection":
        """https://getbootstrap.com/docs/5.3/components/navs-tabs/#tabs"""
        return self.with_variant(MenuType.TABS)

    def pills(self) -> "ItemCollection":
        """https://getbootstrap.com/docs/5.3/components/navs-tabs/#pills"""
        return self.with_variant(MenuType.PILLS)

    def underline(self) -> "ItemCollection":
        """https://getbootstrap.com/docs/5.3/components/navs-tabs/#underline"""
        return self.with_variant(MenuType.UNDERLINE)

    def with_vertical(self, size: Union[Size, str, None]) -> "ItemCollection":
        """https://getbootstrap.com/docs/5.3/components/navs-tabs/#vertical"""
        return replace(self, vertical=size)

    def with_activeMatcher(self, matcher: ActiveMatcher) -> "ItemCollection":
        return replace(self, active_matcher=matcher)

    def with_activateParents(self, activate: bool = True) -> "ItemCollection":
        return replace(self, activate_parents=activate)

    def with_defaultItemWrapper(self, wrapper: Union[ItemWrapper, bool]) -> "ItemCollection":
        return replace(self, default_item_wrapper=wrapper)

    def with_attributes(self, attributes: Mapping[str, Any]) -> "ItemCollection":
        return replace(self, attributes=attributes)

    def with_styles(self, *styles: Union[NavStyle, str]) -> "ItemCollection":
        return replace(self, styles=self.styles + tuple(styles))

    def with_tabContentAttributes(self, attributes: Mapping[str, Any]) -> "ItemCollection":
        return replace(self, tab_content_attributes=attributes)

    def with_renderContent(self, render: bool = True) -> "ItemCollection":
        return replace(self, render_content=render)

    def with_autoId(self, auto_id: bool = True) -> "ItemCollection":
        return replace(self, auto_id=auto_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def visibleItems_get(self) -> List[Tuple[int, Item]]:
        """Visible items paired with their declaration-order index"""
        return [(index, item) for index, item in enumerate(self.items) if item.visible]

    def panes_has(self) -> bool:
        """True if any visible item carries a tab pane"""
        return any(item.pane is not None for _, item in self.visibleItems_get())

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)
