"""
bootnav - Bootstrap 5 nav, tab and dropdown markup from declarative item trees

Build an ItemCollection of Items, pick a variant and render it server-side:

    from bootnav import Item, ItemCollection, nav_render

    nav = ItemCollection.of(
        Item.link("Home", "/"),
        Item.link("Orders", "/orders"),
    ).pills().with_activeMatcher("/orders")
    html = nav_render(nav)
"""

__version__ = "1.0.0"

from .lib import (
    ConfigurationError,
    LOG,
    state_connectToLogger,
    IdGenerator,
    RendererRegistry,
    ItemRenderer,
    ListComposer,
    nav_render,
    collection_fromDict,
    collection_fromYaml,
    collection_load,
)
from .models import (
    Item,
    ItemKind,
    ItemWrapper,
    TabPane,
    ItemCollection,
    RenderContext,
    RendererSpec,
    RendererCategory,
    MenuType,
    Size,
    DropDirection,
    NavStyle,
)

__all__ = [
    "ConfigurationError",
    "LOG",
    "state_connectToLogger",
    "IdGenerator",
    "RendererRegistry",
    "ItemRenderer",
    "ListComposer",
    "nav_render",
    "collection_fromDict",
    "collection_fromYaml",
    "collection_load",
    "Item",
    "ItemKind",
    "ItemWrapper",
    "TabPane",
    "ItemCollection",
    "RenderContext",
    "RendererSpec",
    "RendererCategory",
    "MenuType",
    "Size",
    "DropDirection",
    "NavStyle",
    "__version__",
]
