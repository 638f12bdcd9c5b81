"""
Enumerations for nav variants, breakpoints, dropdown directions and styles

Every class name that depends on the kind of list being rendered comes out
of variantStyle_get(); renderers never spell those strings themselves.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict, Optional, Type, TypeVar

from ..lib.errors import ConfigurationError

E = TypeVar("E", bound=Enum)


def enum_coerce(enum_cls: Type[E], value: Any, what: str) -> E:
    """
    Convert a member, member name or member value into ``enum_cls``.

    Names are matched case-insensitively, so ``"tabs"``, ``"TABS"`` and
    ``MenuType.TABS`` are equivalent.

    Raises:
        ConfigurationError: If the value names no member
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().upper().replace("-", "_")
        if key in enum_cls.__members__:
            return enum_cls.__members__[key]
        for member in enum_cls:
            if member.value == value:
                return member
    names = ", ".join(member.name.lower() for member in enum_cls)
    raise ConfigurationError(f"Unknown {what} '{value}'. Expected one of: {names}.")


class MenuType(Enum):
    """
    Kind of item list

    The value is the container class string. DROPDOWN is used for nested
    menus and is not normally set by callers.
    """
    PLAIN = "nav"
    TABS = "nav nav-tabs"
    PILLS = "nav nav-pills"
    UNDERLINE = "nav nav-underline"
    DROPDOWN = "dropdown-menu"


@dataclass(frozen=True)
class VariantStyle:
    """
    Class and attribute values derived from a MenuType

    Attributes:
        container_class: Classes for the list container (e.g., "nav nav-tabs")
        link_class: Base class for every link (e.g., "nav-link")
        item_class: Class for the default item wrapper, None for a bare wrapper
        toggle: ``data-bs-toggle`` value for links in this list, None for none
    """
    container_class: str
    link_class: str
    item_class: Optional[str]
    toggle: Optional[str]


_VARIANT_STYLES: Dict[MenuType, VariantStyle] = {
    MenuType.PLAIN: VariantStyle("nav", "nav-link", "nav-item", None),
    MenuType.TABS: VariantStyle("nav nav-tabs", "nav-link", "nav-item", "tab"),
    MenuType.PILLS: VariantStyle("nav nav-pills", "nav-link", "nav-item", "pill"),
    MenuType.UNDERLINE: VariantStyle("nav nav-underline", "nav-link", "nav-item", "tab"),
    MenuType.DROPDOWN: VariantStyle("dropdown-menu", "dropdown-item", None, None),
}


def variantStyle_get(menu_type: MenuType) -> VariantStyle:
    """Look up the class/attribute values for a MenuType"""
    return _VARIANT_STYLES[menu_type]


class Size(Enum):
    """Bootstrap breakpoints, used for responsive vertical navs"""
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XXL = "xxl"

    def verticalClass_get(self) -> str:
        """Return the flex-column modifier for this breakpoint"""
        if self is Size.XS:
            return "flex-column"
        return f"flex-{self.value}-column"


class DropDirection(Enum):
    """Class put on the element wrapping a dropdown toggle and its menu"""
    DOWN = "dropdown"
    UP = "dropup"
    END = "dropend"
    START = "dropstart"
    DOWN_CENTER = "dropdown-center"
    UP_CENTER = "dropup-center dropup"


class NavStyle(Enum):
    """
    Extra container classes for navs

    See https://getbootstrap.com/docs/5.3/components/navs-tabs/
    """
    FILL = "nav-fill"                      # items fill the width, sized by content
    JUSTIFY = "nav-justified"              # items fill the width, equal size
    CENTER = "justify-content-center"
    END = "justify-content-end"
    NAVBAR = "navbar-nav"
    VERTICAL = "flex-column"
