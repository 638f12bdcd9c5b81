"""
Tab content for navs whose items carry TabPane objects

When a collection has panes, every pane item gets a generated link id and
pane id (unless its attributes already name one). The links turn into tab
controls and a ``<div class="tab-content">`` block follows the nav.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

from ..models.collection import ItemCollection
from ..models.enums import VariantStyle
from ..models.item import Item, TabPane
from .ids import IdGenerator
from . import markup

TAB_CONTENT_CLASS = "tab-content"
TAB_PANE_CLASS = "tab-pane"


@dataclass(frozen=True)
class PaneIds:
    """Ids linking a tab control to its pane"""
    link_id: str
    pane_id: str


class TabContent:
    """Builds tab link attributes and the tab-content block"""

    def __init__(self, separator: str) -> None:
        self.separator = separator

    def paneIds_assign(self, collection: ItemCollection, ids: IdGenerator) -> Dict[int, PaneIds]:
        """
        Assign ids to every visible item with a pane, in declaration order.

        Returns:
            Mapping of declaration index to PaneIds
        """
        assigned: Dict[int, PaneIds] = {}
        for index, item in collection.visibleItems_get():
            if item.pane is None:
                continue
            base = ids.id_next()
            link_id = item.link_attributes.get("id") or f"{base}-tab"
            pane_id = item.pane.attributes.get("id") or f"{base}-pane"
            assigned[index] = PaneIds(link_id=str(link_id), pane_id=str(pane_id))
        return assigned

    def linkAttributes_make(
        self, item: Item, pane_ids: PaneIds, active: bool, style: VariantStyle
    ) -> Dict[str, Any]:
        """
        Attributes that turn an item's link into a tab control

        URL-less items become buttons targeting the pane; items with a URL
        keep it.
        """
        attributes: Dict[str, Any] = {
            "id": pane_ids.link_id,
            "data-bs-toggle": style.toggle or "tab",
        }
        if item.url is None:
            attributes["data-bs-target"] = f"#{pane_ids.pane_id}"
        attributes["role"] = "tab"
        attributes["aria-controls"] = pane_ids.pane_id
        if not item.disabled:
            attributes["aria-selected"] = "true" if active else "false"
        return attributes

    def content_render(
        self,
        collection: ItemCollection,
        flags: List[bool],
        pane_ids: Mapping[int, PaneIds],
    ) -> str:
        """Render the tab-content block for the collection's panes"""
        panes: List[str] = []
        for index, item in collection.visibleItems_get():
            if item.pane is None or index not in pane_ids:
                continue
            panes.append(self.pane_render(item.pane, pane_ids[index], flags[index]))

        attributes = markup.attributes_merge(
            {"class": [TAB_CONTENT_CLASS]}, collection.tab_content_attributes
        )
        return markup.block_render("div", panes, attributes, self.separator)

    def pane_render(self, pane: TabPane, pane_ids: PaneIds, active: bool) -> str:
        """Render one tab pane"""
        classes = markup.classes_merge(
            TAB_PANE_CLASS,
            "fade" if pane.fade else None,
            "active" if active else None,
            "show" if pane.fade and active else None,
        )
        own = dict(pane.attributes)
        own.pop("id", None)
        attributes: Dict[str, Any] = {
            "id": pane_ids.pane_id,
            "class": classes,
            "role": own.pop("role", "tabpanel"),
            "aria-labelledby": own.pop("aria-labelledby", pane_ids.link_id),
            "tabindex": own.pop("tabindex", 0),
        }
        attributes = markup.attributes_merge(attributes, own)
        return markup.tag_render(pane.tag, pane.content, attributes, encode_content=pane.encode)
