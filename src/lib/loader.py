"""
Nav definition loader for bootnav

Builds an ItemCollection from a plain dict or a YAML document, so navs can
be kept in configuration files and rendered from the command line.

Example nav.yaml:

    variant: pills
    active_item: /orders
    activate_parents: true
    styles: [fill]
    items:
      - label: Home
        url: /
      - label: Orders
        items:
          - {label: Open, url: /orders?status=open}
          - divider
          - {header: Archive}
          - {label: Closed, url: /orders/closed}
      - label: Settings
        url: /settings
        disabled: true

Item entries are mappings, or one of the shorthand strings ``divider`` /
``---``. ``header``, ``text`` and ``html`` keys select the matching item kind.
Unknown keys are logged and ignored, or raise in strict mode
(BOOTNAV_STRICT_MODE=true).
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

from ..models.collection import ItemCollection
from ..models.enums import enum_coerce
from ..models.item import Item, ItemKind, ItemWrapper, TabPane
from .errors import ConfigurationError
from .log import LOG

DIVIDER_SHORTHANDS = {"divider", "---", "-"}

ITEM_KEYS = {
    "label", "url", "active", "disabled", "visible", "encode", "attributes",
    "link_attributes", "tag", "wrapper", "direction", "pane", "items",
    "dropdown", "renderer", "require_label", "kind",
    "divider", "header", "text", "html",
}

COLLECTION_KEYS = {
    "items", "tag", "variant", "vertical", "active_item", "activate_parents",
    "item_wrapper", "attributes", "styles", "tab_content_attributes",
    "render_content", "auto_id",
}

PANE_KEYS = {"content", "encode", "fade", "tag", "attributes"}

WRAPPER_KEYS = {"tag", "attributes"}


def _strict_get(strict: Optional[bool]) -> bool:
    from ..config import appsettings

    return appsettings.strict_mode if strict is None else strict


def _keys_check(data: Mapping[str, Any], allowed: set, where: str, strict: bool) -> None:
    unknown = sorted(str(key) for key in data if key not in allowed)
    if not unknown:
        return
    message = f"Unknown keys in {where}: {', '.join(unknown)}"
    if strict:
        raise ConfigurationError(message + ".")
    LOG(message + " (ignored)", level=1)


def _mapping_get(data: Mapping[str, Any], key: str, where: str) -> Dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"'{key}' in {where} must be a mapping.")
    return dict(value)


def _bool_get(data: Mapping[str, Any], key: str, default: bool, where: str) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ConfigurationError(f"'{key}' in {where} must be true or false, got {value!r}.")
    return value


def pane_fromDict(data: Union[str, Mapping[str, Any]], where: str, strict: bool) -> TabPane:
    """Build a TabPane from a content string or a mapping"""
    if isinstance(data, str):
        return TabPane(content=data)
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"Pane of {where} must be a string or a mapping.")
    _keys_check(data, PANE_KEYS, f"pane of {where}", strict)
    return TabPane(
        content=str(data.get("content", "")),
        encode=_bool_get(data, "encode", False, where),
        fade=_bool_get(data, "fade", False, where),
        tag=data.get("tag", "div"),
        attributes=_mapping_get(data, "attributes", where),
    )


def wrapper_fromValue(value: Any, where: str, strict: bool) -> Union[ItemWrapper, bool, None]:
    """
    Read a wrapper setting.

    Accepts true/false, a tag name, or a mapping with ``tag`` and
    ``attributes``.
    """
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        return ItemWrapper(tag=value)
    if isinstance(value, Mapping):
        _keys_check(value, WRAPPER_KEYS, f"wrapper of {where}", strict)
        return ItemWrapper(
            tag=value.get("tag", "li"),
            attributes=_mapping_get(value, "attributes", where),
        )
    raise ConfigurationError(f"Wrapper of {where} must be a bool, a tag or a mapping.")


def item_fromDict(data: Union[str, Mapping[str, Any]], strict: Optional[bool] = None, where: str = "item") -> Item:
    """
    Build an Item from one entry of an ``items`` list.

    Args:
        data: Mapping of item fields, or a divider shorthand string
        strict: Raise on unknown keys (defaults to BOOTNAV_STRICT_MODE)
        where: Position description used in error messages

    Raises:
        ConfigurationError: On malformed entries or invalid item settings
    """
    strict = _strict_get(strict)

    if isinstance(data, str):
        if data.strip().lower() in DIVIDER_SHORTHANDS:
            return Item.divider()
        raise ConfigurationError(f"Unrecognised shorthand '{data}' for {where}.")
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"{where} must be a mapping, got {type(data).__name__}.")

    _keys_check(data, ITEM_KEYS, where, strict)

    options: Dict[str, Any] = {}
    kind: Any = data.get("kind", ItemKind.LINK)
    label = data.get("label", "")
    if data.get("divider"):
        kind = ItemKind.DIVIDER
    for shorthand in ("header", "text", "html"):
        if shorthand in data:
            kind = shorthand
            label = data[shorthand]
    kind = enum_coerce(ItemKind, kind, "item kind")
    if kind is ItemKind.HTML:
        options["encode"] = False

    for flag in ("active", "disabled", "encode", "require_label"):
        if flag in data:
            options[flag] = _bool_get(data, flag, False, where)
    if "visible" in data:
        options["visible"] = _bool_get(data, "visible", True, where)

    url = data.get("url")
    if url is not None and not isinstance(url, str):
        raise ConfigurationError(f"'url' in {where} must be a string.")

    nested = data.get("items", data.get("dropdown"))
    if nested is not None:
        if isinstance(nested, list):
            nested = {"items": nested}
        options["dropdown"] = collection_fromDict(nested, strict=strict, where=f"dropdown of {where}")

    if "pane" in data and data["pane"] is not None:
        options["pane"] = pane_fromDict(data["pane"], where, strict)

    return Item(
        label=label,
        url=url,
        kind=kind,
        tag=data.get("tag"),
        wrapper=wrapper_fromValue(data.get("wrapper"), where, strict),
        direction=data.get("direction"),
        renderer=data.get("renderer"),
        attributes=_mapping_get(data, "attributes", where),
        link_attributes=_mapping_get(data, "link_attributes", where),
        **options,
    )


def collection_fromDict(
    data: Union[Mapping[str, Any], List[Any]],
    strict: Optional[bool] = None,
    where: str = "nav",
) -> ItemCollection:
    """
    Build an ItemCollection from a nav definition.

    Args:
        data: Mapping of collection settings, or a bare list of items
        strict: Raise on unknown keys (defaults to BOOTNAV_STRICT_MODE)
        where: Position description used in error messages

    Returns:
        ItemCollection equivalent to the hand-built one

    Raises:
        ConfigurationError: On malformed definitions
    """
    strict = _strict_get(strict)

    if isinstance(data, list):
        data = {"items": data}
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"{where} must be a mapping or a list of items.")

    _keys_check(data, COLLECTION_KEYS, where, strict)

    entries = data.get("items") or []
    if not isinstance(entries, list):
        raise ConfigurationError(f"'items' in {where} must be a list.")
    items = [
        item_fromDict(entry, strict=strict, where=f"{where} item {index}")
        for index, entry in enumerate(entries)
    ]

    styles = data.get("styles") or []
    if isinstance(styles, str):
        styles = styles.split()

    wrapper = wrapper_fromValue(data.get("item_wrapper"), where, strict)

    collection = ItemCollection(
        items=tuple(items),
        tag=data.get("tag", "ul"),
        variant=data.get("variant", "plain"),
        vertical=data.get("vertical"),
        active_matcher=data.get("active_item"),
        activate_parents=_bool_get(data, "activate_parents", False, where),
        default_item_wrapper=True if wrapper is None else wrapper,
        attributes=_mapping_get(data, "attributes", where),
        styles=tuple(styles),
        tab_content_attributes=_mapping_get(data, "tab_content_attributes", where),
        render_content=_bool_get(data, "render_content", True, where),
        auto_id=_bool_get(data, "auto_id", False, where),
    )
    LOG(f"Loaded {where} with {len(items)} items", level=3)
    return collection


def collection_fromYaml(source: str, strict: Optional[bool] = None) -> ItemCollection:
    """
    Build an ItemCollection from YAML text.

    Raises:
        ConfigurationError: If the YAML is malformed or the definition invalid
    """
    try:
        data: Any = yaml.safe_load(source)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse nav definition: {e}")
    if data is None:
        data = {}
    return collection_fromDict(data, strict=strict)


def collection_load(path: Union[str, Path], strict: Optional[bool] = None) -> ItemCollection:
    """
    Load an ItemCollection from a YAML file.

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        source = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Failed to load nav definition {path}: {e}")
    LOG(f"Read {len(source)} characters from {path.name}", level=2)
    return collection_fromYaml(source, strict=strict)
