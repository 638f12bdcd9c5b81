"""
Item model: one entry of a nav or dropdown menu

Items are frozen dataclasses. Every ``with_*`` helper returns a new Item
(re-validated), so one base item can be reused across many navs.
They compare by value but are not hashable: attribute maps are stored as
read-only views of plain dicts, whose values may themselves be lists.
"""

from enum import Enum
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union, TYPE_CHECKING

from ..lib import markup
from ..lib.errors import ConfigurationError
from .enums import DropDirection, enum_coerce

if TYPE_CHECKING:
    from .collection import ItemCollection


class ItemKind(Enum):
    """
    Kinds of item, each with its own built-in renderer

    LINK renders a nav/dropdown link (or button when it has no URL);
    DIVIDER, HEADER and TEXT use fixed Bootstrap dropdown markup;
    HTML passes its label through as raw list content.
    """
    LINK = "link"
    DIVIDER = "divider"
    HEADER = "header"
    TEXT = "text"
    HTML = "html"


# Kinds whose label may not be empty (unless require_label=False)
LABELLED_KINDS = {ItemKind.LINK, ItemKind.HEADER}


def _frozen(attributes: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    return MappingProxyType(dict(attributes or {}))


@dataclass(frozen=True)
class ItemWrapper:
    """
    Tag placed around a rendered item

    Attributes:
        tag: Wrapper tag name (default "li")
        attributes: Extra wrapper attributes; classes are appended after
                    the variant's item class
    """
    tag: str = "li"
    attributes: Mapping[str, Any] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tag", markup.tagName_validate(self.tag))
        object.__setattr__(self, "attributes", _frozen(self.attributes))


@dataclass(frozen=True)
class TabPane:
    """
    Tab content bound to an item

    Attributes:
        content: Pane body (markup unless encode=True)
        encode: HTML-escape the content
        fade: Use the fade transition (adds ``fade``, and ``show`` when active)
        tag: Pane tag (default "div")
        attributes: Extra pane attributes (an ``id`` here overrides the generated one)
    """
    content: str = ""
    encode: bool = False
    fade: bool = False
    tag: str = "div"
    attributes: Mapping[str, Any] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tag", markup.tagName_validate(self.tag))
        object.__setattr__(self, "attributes", _frozen(self.attributes))


@dataclass(frozen=True)
class Item:
    """
    One navigable entry

    Attributes:
        label: Link text (raw text, or markup when encode=False)
        url: Link target; None renders a button (or ``tag``)
        active: Explicitly active
        disabled: Disabled (never together with active)
        visible: False drops the item from output entirely
        encode: HTML-escape the label
        attributes: Attributes for the item wrapper (e.g. the ``<li>``)
        link_attributes: Attributes for the link itself
        dropdown: Nested collection rendered as a dropdown menu
        kind: ItemKind selecting the built-in renderer
        tag: Fallback tag for URL-less links, or the heading tag for headers
        wrapper: None = collection default, False = unwrapped, or an ItemWrapper
        direction: Dropdown direction class for the outer wrapper
        pane: Tab content shown when this item is the active tab
        renderer: Name of a custom renderer in the RendererRegistry
        require_label: Set False to allow an empty label on a link/header
    """
    label: str = ""
    url: Optional[str] = None
    active: bool = False
    disabled: bool = False
    visible: bool = True
    encode: bool = True
    attributes: Mapping[str, Any] = field(default_factory=dict)
    link_attributes: Mapping[str, Any] = field(default_factory=dict)
    dropdown: Optional["ItemCollection"] = None
    kind: ItemKind = ItemKind.LINK
    tag: Optional[str] = None
    wrapper: Union[ItemWrapper, bool, None] = None
    direction: Optional[DropDirection] = None
    pane: Optional[TabPane] = None
    renderer: Optional[str] = None
    require_label: bool = True

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "label", "" if self.label is None else str(self.label))
        object.__setattr__(self, "kind", enum_coerce(ItemKind, self.kind, "item kind"))
        object.__setattr__(self, "attributes", _frozen(self.attributes))
        object.__setattr__(self, "link_attributes", _frozen(self.link_attributes))

        if self.direction is not None:
            object.__setattr__(
                self, "direction", enum_coerce(DropDirection, self.direction, "dropdown direction")
            )
        if self.tag is not None:
            object.__setattr__(self, "tag", markup.tagName_validate(self.tag))
        if self.wrapper is True:
            object.__setattr__(self, "wrapper", ItemWrapper())

        if self.active and self.disabled:
            raise ConfigurationError(
                f"Item '{self.label}' cannot be both active and disabled."
            )
        if self.kind in LABELLED_KINDS and self.require_label and not self.label.strip():
            raise ConfigurationError(
                f"The label of a {self.kind.value} item cannot be empty."
            )

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def link(cls, label: str, url: Optional[str] = None, **options: Any) -> "Item":
        """
        Create a link item.

        Example:
            >>> Item.link("Home", "/", active=True)
        """
        return cls(label=label, url=url, kind=ItemKind.LINK, **options)

    @classmethod
    def divider(cls, **options: Any) -> "Item":
        """Create a ``<hr class="dropdown-divider">`` item"""
        return cls(kind=ItemKind.DIVIDER, **options)

    @classmethod
    def header(cls, label: str, tag: Optional[str] = None, **options: Any) -> "Item":
        """Create a dropdown header (``<h6 class="dropdown-header">`` unless tag is given)"""
        return cls(label=label, tag=tag, kind=ItemKind.HEADER, **options)

    @classmethod
    def text(cls, label: str, **options: Any) -> "Item":
        """Create a non-interactive ``<span class="dropdown-item-text">`` item"""
        return cls(label=label, kind=ItemKind.TEXT, **options)

    @classmethod
    def html(cls, content: str, **options: Any) -> "Item":
        """Create an item whose content is emitted verbatim inside its wrapper"""
        return cls(label=content, kind=ItemKind.HTML, encode=False, **options)

    # ------------------------------------------------------------------
    # Copy-on-write helpers
    # ------------------------------------------------------------------

    def with_label(self, label: str, encode: Optional[bool] = None) -> "Item":
        if encode is None:
            return replace(self, label=label)
        return replace(self, label=label, encode=encode)

    def with_url(self, url: Optional[str]) -> "Item":
        return replace(self, url=url)

    def with_active(self, active: bool = True) -> "Item":
        return replace(self, active=active)

    def with_disabled(self, disabled: bool = True) -> "Item":
        return replace(self, disabled=disabled)

    def with_visible(self, visible: bool) -> "Item":
        return replace(self, visible=visible)

    def with_encode(self, encode: bool) -> "Item":
        return replace(self, encode=encode)

    def with_attributes(self, attributes: Mapping[str, Any]) -> "Item":
        return replace(self, attributes=attributes)

    def with_linkAttributes(self, attributes: Mapping[str, Any]) -> "Item":
        return replace(self, link_attributes=attributes)

    def with_dropdown(self, dropdown: Optional["ItemCollection"]) -> "Item":
        return replace(self, dropdown=dropdown)

    def with_wrapper(self, wrapper: Union[ItemWrapper, bool, None]) -> "Item":
        return replace(self, wrapper=wrapper)

    def with_direction(self, direction: Union[DropDirection, str, None]) -> "Item":
        return replace(self, direction=direction)

    def with_pane(self, pane: Optional[TabPane]) -> "Item":
        return replace(self, pane=pane)

    def with_tag(self, tag: Optional[str]) -> "Item":
        return replace(self, tag=tag)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def dropdown_has(self) -> bool:
        """True if this item owns a nested collection"""
        return self.dropdown is not None

    def urlPath_get(self) -> Optional[str]:
        """Return the URL with any ``?query`` suffix removed"""
        if self.url is None:
            return None
        return url_stripQuery(self.url)

    def label_encode(self) -> str:
        """Return the label, HTML-escaped unless encode is False"""
        return markup.encode(self.label) if self.encode else self.label


def url_stripQuery(url: str) -> str:
    """Drop everything from the first ``?`` onward"""
    return url.split("?", 1)[0]
