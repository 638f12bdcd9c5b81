"""
HTML markup helpers shared by every bootnav renderer

Small, pure functions for escaping text, merging CSS class lists with
append semantics, rendering attribute maps and building tags. The item
renderer, list composer, dropdown renderer and tab content all compose
these rather than inheriting from a common widget base.

Attribute values:
    - None / False      -> attribute omitted
    - True              -> bare attribute (e.g. ``hidden``)
    - list / tuple      -> space-joined (``class``) or ``; ``-joined (``style``)
    - dict              -> ``style`` declarations, or expanded to ``data-*`` /
                           ``aria-*`` when the key is ``data`` / ``aria``
    - anything else     -> str() of the value, HTML-escaped

Example:
    >>> tag_render("a", "Home", {"class": ["nav-link", "active"], "href": "/"})
    '<a class="nav-link active" href="/">Home</a>'
"""

import html
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .errors import ConfigurationError

VOID_TAGS = {"area", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "wbr"}

_TAG_NAME = re.compile(r"^[a-z][a-z0-9-]*$")


def encode(text: Any) -> str:
    """HTML-escape text content or an attribute value"""
    return html.escape(str(text), quote=True)


def tagName_validate(name: Any, allowed: Optional[Iterable[str]] = None) -> str:
    """
    Check a tag name and return it lower-cased.

    Args:
        name: Candidate tag name
        allowed: Optional closed set of accepted names

    Raises:
        ConfigurationError: If the name is empty, malformed or not allowed
    """
    if not isinstance(name, str) or not name.strip():
        raise ConfigurationError("Tag cannot be empty string.")
    tag = name.strip().lower()
    if not _TAG_NAME.match(tag):
        raise ConfigurationError(f"Invalid tag name '{name}'.")
    if allowed is not None and tag not in allowed:
        raise ConfigurationError(
            f"Unsupported tag '{name}'. Expected one of: {', '.join(sorted(allowed))}."
        )
    return tag


def classes_merge(*groups: Any) -> List[str]:
    """
    Flatten class groups into one ordered list without duplicates.

    Each group may be None, a whitespace separated string or an iterable of
    strings (None entries skipped). Earlier groups come first; a class that
    appears again later keeps its first position.
    """
    merged: List[str] = []
    for group in groups:
        if group is None or group is False:
            continue
        names = group.split() if isinstance(group, str) else _classes_flatten(group)
        for name in names:
            if name and name not in merged:
                merged.append(name)
    return merged


def _classes_flatten(group: Iterable[Any]) -> List[str]:
    names: List[str] = []
    for entry in group:
        if entry is None:
            continue
        names.extend(str(getattr(entry, "value", entry)).split())
    return names


def cssClass_add(attributes: Mapping[str, Any], *classes: Any) -> Dict[str, Any]:
    """
    Return a copy of ``attributes`` with ``classes`` appended to its class list.

    Existing classes stay first; the attribute map itself is not modified.
    """
    merged = dict(attributes)
    merged["class"] = classes_merge(attributes.get("class"), *classes)
    return merged


def attributes_merge(*maps: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Merge attribute maps left to right.

    ``class`` lists are appended, ``style`` declarations are concatenated,
    every other key is overwritten by later maps.
    """
    merged: Dict[str, Any] = {}
    for attributes in maps:
        if not attributes:
            continue
        for key, value in attributes.items():
            if key == "class" and "class" in merged:
                merged["class"] = classes_merge(merged["class"], value)
            elif key == "style" and merged.get("style"):
                merged["style"] = _style_format(merged["style"]) + "; " + _style_format(value)
            else:
                merged[key] = value
    return merged


def _style_format(value: Any) -> str:
    if isinstance(value, Mapping):
        return "; ".join(f"{name}: {declaration}" for name, declaration in value.items())
    if isinstance(value, (list, tuple)):
        return "; ".join(str(entry) for entry in value if entry)
    return str(value)


def attributes_render(attributes: Optional[Mapping[str, Any]]) -> str:
    """
    Render an attribute map as a string with a leading space per attribute.

    Insertion order is preserved so output stays diffable.
    """
    if not attributes:
        return ""

    rendered: List[str] = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if name in ("data", "aria") and isinstance(value, Mapping):
            for suffix, nested in value.items():
                rendered.extend(_attribute_format(f"{name}-{suffix}", nested))
            continue
        rendered.extend(_attribute_format(name, value))
    return "".join(rendered)


def _attribute_format(name: str, value: Any) -> List[str]:
    if value is None or value is False:
        return []
    if value is True:
        return [f" {name}"]
    if name == "class":
        value = " ".join(classes_merge(value))
        if not value:
            return []
    elif name == "style":
        value = _style_format(value)
    elif isinstance(value, (list, tuple)):
        value = " ".join(str(entry) for entry in value)
    elif isinstance(value, Mapping):
        raise ConfigurationError(f"Attribute '{name}' cannot take a mapping value.")
    return [f' {name}="{encode(value)}"']


def tag_render(
    name: str,
    content: str = "",
    attributes: Optional[Mapping[str, Any]] = None,
    encode_content: bool = False,
) -> str:
    """
    Render a complete tag.

    Args:
        name: Tag name
        content: Inner content (ignored for void tags)
        attributes: Attribute map
        encode_content: HTML-escape ``content`` before inserting it

    Returns:
        The tag as a string
    """
    attrs = attributes_render(attributes)
    if name in VOID_TAGS:
        return f"<{name}{attrs}>"
    body = encode(content) if encode_content else content
    return f"<{name}{attrs}>{body}</{name}>"


def block_render(
    name: str, parts: List[str], attributes: Optional[Mapping[str, Any]], separator: str
) -> str:
    """Render a container tag whose children are joined and framed by ``separator``"""
    attrs = attributes_render(attributes)
    inner = separator.join(parts)
    return f"<{name}{attrs}>{separator}{inner}{separator}</{name}>"
