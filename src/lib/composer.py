"""
List composer for bootnav ItemCollections

Turns an ItemCollection into the nav markup:

1. Resolve which items are active (explicit flag, index or URL matcher,
   then optional propagation to dropdown owners)
2. Render every visible item through the ItemRenderer, or through the
   DropdownRenderer when it owns a nested collection
3. Wrap each item (``<li class="nav-item">`` by default) and the whole
   list (``<ul class="nav ...">``)
4. Append the tab-content block when items carry panes (unless
   render_content is off; ``tabContent_render`` then renders it on its own)

Example:
    >>> nav = ItemCollection.of(
    ...     Item.link("Link 1", "/link-1"),
    ...     Item.link("Link 2", "/link-2?foo=bar"),
    ... ).with_activeMatcher("/link-2")
    >>> print(ListComposer().render(nav))
    <ul class="nav">
    <li class="nav-item"><a class="nav-link" href="/link-1">Link 1</a></li>
    <li class="nav-item"><a class="nav-link active" href="/link-2?foo=bar" aria-current="page">Link 2</a></li>
    </ul>
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..models.collection import ActiveMatcher, ItemCollection
from ..models.context import RenderContext
from ..models.enums import MenuType, variantStyle_get
from ..models.item import Item, ItemWrapper, url_stripQuery
from .dropdown import DropdownRenderer
from .ids import IdGenerator
from .log import LOG
from .renderer import ItemRenderer
from .tabs import PaneIds, TabContent
from . import markup

DROPDOWN_MENU_TAG = "ul"


@dataclass(frozen=True)
class ActiveState:
    """
    Resolved active flags for one collection and its nested dropdowns

    Attributes:
        flags: One flag per item, in declaration order
        children: ActiveState of each item's dropdown, keyed by item index
    """
    flags: Tuple[bool, ...] = ()
    children: Mapping[int, "ActiveState"] = field(default_factory=dict)

    def active_has(self) -> bool:
        """True if any item at this level is active"""
        return any(self.flags)

    def child_get(self, index: int) -> "ActiveState":
        return self.children.get(index, ActiveState())


def url_matches(url: Optional[str], matcher: str) -> bool:
    """
    Compare an item URL against a string matcher.

    Matches when the matcher equals the full URL, or when it equals the
    URL with its ``?query`` suffix stripped. The matcher itself is compared
    as given, so ``/a?x=2`` only matches that exact URL.
    """
    if url is None:
        return False
    return url == matcher or url_stripQuery(url) == matcher


class ListComposer:
    """
    Renders ItemCollections

    Args:
        renderer: ItemRenderer to use (its registry holds any custom renderers)
        ids: IdGenerator shared by every render of this composer; by default
             each render call gets a fresh one
        separator: Text between items (defaults to BOOTNAV_ITEM_SEPARATOR)
    """

    def __init__(
        self,
        renderer: Optional[ItemRenderer] = None,
        ids: Optional[IdGenerator] = None,
        separator: Optional[str] = None,
    ) -> None:
        from ..config import appsettings

        self.renderer = renderer if renderer is not None else ItemRenderer()
        self.ids = ids
        self.separator = appsettings.item_separator if separator is None else separator
        self.dropdowns = DropdownRenderer(self)
        self.tabs = TabContent(self.separator)

    # ------------------------------------------------------------------
    # Active resolution
    # ------------------------------------------------------------------

    def activeState_resolve(
        self,
        collection: ItemCollection,
        inherited_matcher: ActiveMatcher = None,
        inherited_parents: bool = False,
    ) -> ActiveState:
        """
        Decide which items of a collection (and its dropdowns) are active.

        Per item, in declaration order:
            1. An explicit ``active=True`` wins.
            2. An integer matcher marks the item at that index (invisible
               items still count towards the index).
            3. A string matcher marks the first item whose URL matches.
            4. With activate_parents, an item whose dropdown has an active
               item at any depth is active too.

        Invisible and disabled items are never activated by 2-4. A nested
        collection uses its own matcher, or else inherits a string matcher
        (never an index) from its parent; activate_parents is inherited.

        Args:
            collection: Collection to resolve
            inherited_matcher: Effective matcher of the parent collection
            inherited_parents: activate_parents of the parent collection

        Returns:
            ActiveState tree mirroring the collection
        """
        matcher = collection.active_matcher
        if matcher is None and isinstance(inherited_matcher, str):
            matcher = inherited_matcher
        activate_parents = collection.activate_parents or inherited_parents

        flags: List[bool] = []
        children: Dict[int, ActiveState] = {}
        matched = False

        for index, item in enumerate(collection.items):
            child: Optional[ActiveState] = None
            if item.dropdown is not None:
                child = self.activeState_resolve(item.dropdown, matcher, activate_parents)
                children[index] = child

            active = False
            if item.visible:
                if item.active:
                    active = True
                elif not item.disabled:
                    if isinstance(matcher, int):
                        active = index == matcher
                    elif matcher is not None and not matched and url_matches(item.url, matcher):
                        active = matched = True
                        LOG(f"Item {index} '{item.label}' matched '{matcher}'", level=3)
                    if not active and activate_parents and child is not None and child.active_has():
                        active = True
                        LOG(f"Item {index} '{item.label}' activated by a descendant", level=3)
            flags.append(active)

        if collection.panes_has() and not any(flags):
            for index, item in collection.visibleItems_get():
                if not item.disabled:
                    flags[index] = True
                    break

        return ActiveState(flags=tuple(flags), children=children)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, collection: ItemCollection, ids: Optional[IdGenerator] = None) -> str:
        """
        Render a collection.

        Args:
            collection: Collection to render
            ids: Id source for this call (overrides the composer's)

        Returns:
            HTML fragment, or "" when no item is visible
        """
        if not collection.visibleItems_get():
            LOG("Collection has no visible items, nothing to render", level=2)
            return ""

        ids = ids or self.ids or IdGenerator()
        state = self.activeState_resolve(collection)
        return self.collection_render(collection, state, ids)

    def tabContent_render(self, collection: ItemCollection, ids: Optional[IdGenerator] = None) -> str:
        """
        Render only the tab-content block of a collection.

        Ids are drawn in the same order as ``render`` draws them, so a fresh
        IdGenerator here yields the same pane ids as a fresh one there. Use it
        with ``with_renderContent(False)`` to place the panes elsewhere on the
        page.

        Returns:
            The ``tab-content`` block, or "" when no visible item has a pane
        """
        if not collection.panes_has():
            LOG("Collection has no tab panes, no tab content to render", level=2)
            return ""

        ids = ids or self.ids or IdGenerator()
        state = self.activeState_resolve(collection)
        _, pane_ids = self.ids_assign(collection, ids)
        return self.tabs.content_render(collection, list(state.flags), pane_ids)

    def ids_assign(
        self, collection: ItemCollection, ids: IdGenerator
    ) -> Tuple[Optional[str], Dict[int, PaneIds]]:
        """
        Draw the generated ids of a top-level collection.

        The container id comes first (only with ``auto_id`` and no caller
        ``id``), then one id per pane item in declaration order.

        Returns:
            (container id or None, pane ids keyed by declaration index)
        """
        container_id: Optional[str] = None
        if collection.auto_id and "id" not in collection.attributes:
            container_id = ids.id_next()
        pane_ids: Dict[int, PaneIds] = {}
        if collection.panes_has():
            pane_ids = self.tabs.paneIds_assign(collection, ids)
        return container_id, pane_ids

    def collection_render(
        self, collection: ItemCollection, state: ActiveState, ids: IdGenerator, depth: int = 0
    ) -> str:
        """Render a resolved top-level collection (container plus tab content)"""
        visible = collection.visibleItems_get()
        if not visible:
            return ""

        LOG(
            f"Rendering {len(visible)} visible items as {collection.variant.name.lower()}",
            level=2,
        )

        container_id, pane_ids = self.ids_assign(collection, ids)

        parts = self.items_render(
            collection, state, ids, depth, collection.variant, collection.default_item_wrapper, pane_ids
        )

        style = variantStyle_get(collection.variant)
        container_classes = markup.classes_merge(
            style.container_class,
            collection.vertical.verticalClass_get() if collection.vertical else None,
            collection.styles,
        )
        extra: Dict[str, Any] = {}
        if pane_ids and "role" not in collection.attributes:
            extra["role"] = "tablist"
        attributes = markup.attributes_merge(
            {"id": container_id} if container_id else None,
            {"class": container_classes},
            collection.attributes,
            extra,
        )
        html = markup.block_render(collection.tag, parts, attributes, self.separator)

        if pane_ids and collection.render_content:
            html += self.separator + self.tabs.content_render(collection, list(state.flags), pane_ids)
        return html

    def menu_render(
        self,
        collection: ItemCollection,
        state: ActiveState,
        ids: Optional[IdGenerator],
        depth: int,
    ) -> str:
        """
        Render a nested collection as a dropdown menu.

        The container is always ``<ul class="dropdown-menu">`` and items get
        a bare ``<li>``; the collection's own attributes and styles are
        appended to the container.
        """
        if not collection.visibleItems_get():
            return ""

        ids = ids or IdGenerator()
        LOG(f"Rendering dropdown menu at depth {depth}", level=3)
        parts = self.items_render(
            collection, state, ids, depth, MenuType.DROPDOWN, ItemWrapper(), {}
        )
        style = variantStyle_get(MenuType.DROPDOWN)
        attributes = markup.attributes_merge(
            {"class": markup.classes_merge(style.container_class, collection.styles)},
            collection.attributes,
        )
        return markup.block_render(DROPDOWN_MENU_TAG, parts, attributes, self.separator)

    def items_render(
        self,
        collection: ItemCollection,
        state: ActiveState,
        ids: IdGenerator,
        depth: int,
        menu_type: MenuType,
        default_wrapper: Any,
        pane_ids: Mapping[int, PaneIds],
    ) -> List[str]:
        """Render every visible item of a collection, each in its wrapper"""
        style = variantStyle_get(menu_type)
        parts: List[str] = []

        for index, item in collection.visibleItems_get():
            context = RenderContext(
                menu_type=menu_type,
                active=state.flags[index],
                depth=depth,
                ids=ids,
            )
            wrapper_attributes: Dict[str, Any] = {}
            if index in pane_ids:
                context = context.with_extras(
                    attributes=self.tabs.linkAttributes_make(
                        item, pane_ids[index], context.active, style
                    )
                )
                wrapper_attributes["role"] = "presentation"

            if item.dropdown is not None:
                content = self.dropdowns.render(item, context, state.child_get(index))
                if content is not None:
                    parts.append(
                        self.item_wrap(
                            content,
                            item,
                            menu_type,
                            default_wrapper,
                            extra_classes=(self.dropdowns.directionClass_get(item, context),),
                            extra_attributes=wrapper_attributes,
                        )
                    )
                    continue

            wrapper = self.wrapper_resolve(item, default_wrapper)
            if wrapper is None and item.attributes:
                item = item.with_linkAttributes(
                    markup.attributes_merge(item.link_attributes, item.attributes)
                )
            parts.append(
                self.item_wrap(
                    self.renderer.render(item, context),
                    item,
                    menu_type,
                    default_wrapper,
                    extra_attributes=wrapper_attributes,
                )
            )
        return parts

    def wrapper_resolve(self, item: Item, default_wrapper: Any) -> Optional[ItemWrapper]:
        """
        Wrapper for an item: its own override, else the collection default.

        Returns:
            ItemWrapper, or None when the item is emitted bare
        """
        chosen = default_wrapper if item.wrapper is None else item.wrapper
        if chosen is False:
            return None
        if chosen is True:
            return ItemWrapper()
        return chosen

    def item_wrap(
        self,
        content: str,
        item: Item,
        menu_type: MenuType,
        default_wrapper: Any,
        extra_classes: Tuple[str, ...] = (),
        extra_attributes: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """
        Wrap rendered item content.

        Wrapper classes: the variant's item class, then ``extra_classes``
        (the dropdown direction), then the wrapper's and the item's own
        classes. A dropdown with wrapping disabled still gets a ``<div>``
        to carry its direction class.
        """
        wrapper = self.wrapper_resolve(item, default_wrapper)
        item_class = variantStyle_get(menu_type).item_class
        if wrapper is None:
            if not extra_classes:
                return content
            wrapper = ItemWrapper(tag="div")
            item_class = None

        attributes = markup.attributes_merge(
            {"class": markup.classes_merge(item_class, extra_classes)},
            wrapper.attributes,
            item.attributes,
            extra_attributes,
        )
        return markup.tag_render(wrapper.tag, content, attributes)


def nav_render(collection: ItemCollection, **options: Any) -> str:
    """
    Render a collection with a default ListComposer.

    Args:
        collection: Collection to render
        **options: Passed to ListComposer (renderer, ids, separator)
    """
    return ListComposer(**options).render(collection)
