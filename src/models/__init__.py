"""
Models package for bootnav

Contains the immutable item/collection value objects, the variant enums
and the pipeline state.
"""

from .enums import MenuType, VariantStyle, variantStyle_get, Size, DropDirection, NavStyle
from .item import Item, ItemKind, ItemWrapper, TabPane
from .collection import ItemCollection
from .context import RenderContext
from .renderers import RendererSpec, RendererCategory, RESERVED_RENDERERS
from .state import ProgramState, pipeline

__all__ = [
    "MenuType",
    "VariantStyle",
    "variantStyle_get",
    "Size",
    "DropDirection",
    "NavStyle",
    "Item",
    "ItemKind",
    "ItemWrapper",
    "TabPane",
    "ItemCollection",
    "RenderContext",
    "RendererSpec",
    "RendererCategory",
    "RESERVED_RENDERERS",
    "ProgramState",
    "pipeline",
]
