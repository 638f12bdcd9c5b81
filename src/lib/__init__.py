"""
bootnav - Bootstrap 5 nav, tab and dropdown markup from declarative item trees

Renders immutable Item/ItemCollection trees into server-side HTML fragments.
"""

__version__ = "1.0.0"

from .errors import ConfigurationError
from . import markup
from .log import LOG, state_connectToLogger
from .ids import IdGenerator
from .registry import RendererRegistry
from .renderer import ItemRenderer
from .composer import ListComposer, ActiveState, nav_render
from .dropdown import DropdownRenderer
from .tabs import TabContent
from .loader import collection_fromDict, collection_fromYaml, collection_load, item_fromDict

__all__ = [
    "ConfigurationError",
    "markup",
    "LOG",
    "state_connectToLogger",
    "IdGenerator",
    "RendererRegistry",
    "ItemRenderer",
    "ListComposer",
    "ActiveState",
    "nav_render",
    "DropdownRenderer",
    "TabContent",
    "collection_fromDict",
    "collection_fromYaml",
    "collection_load",
    "item_fromDict",
    "__version__",
]
