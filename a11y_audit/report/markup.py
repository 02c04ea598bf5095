"""Minimal HTML element builder that escapes all text by default."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from html import escape
from typing import Any


class Raw(str):
    """Trusted markup emitted without escaping."""

    __slots__ = ()


@dataclass(frozen=True)
class Element:
    """An HTML element with attributes and children."""

    tag: str
    props: dict[str, Any] = field(default_factory=dict)
    children: list[Any] = field(default_factory=list)

    def to_html(self) -> str:
        return render_node(self)


VOID_TAGS = frozenset({"br", "meta", "link", "hr", "img"})


def el(tag: str, *children: Any, **props: Any) -> Element:
    """Build an element, flattening nested lists and dropping ``None``."""
    return Element(tag=tag, props=props, children=list(_flatten(children)))


def _flatten(children: Iterable[Any]) -> Iterable[Any]:
    for child in children:
        if child is None:
            continue
        if isinstance(child, (list, tuple)):
            yield from _flatten(child)
        else:
            yield child


def _normalize_attr_name(name: str) -> str:
    if name == "class_name":
        return "class"
    return name.rstrip("_").replace("_", "-")


def _render_attrs(props: dict[str, Any]) -> str:
    parts: list[str] = []
    for key, value in props.items():
        if value is None or value is False:
            continue
        attr = _normalize_attr_name(key)
        if value is True:
            parts.append(attr)
        else:
            parts.append(f'{attr}="{escape(str(value), quote=True)}"')
    return (" " + " ".join(parts)) if parts else ""


def render_node(node: Any) -> str:
    """Render an element tree; plain text is escaped, ``Raw`` is not."""
    if node is None:
        return ""
    if isinstance(node, Element):
        attrs = _render_attrs(node.props)
        if node.tag in VOID_TAGS:
            return f"<{node.tag}{attrs}>"
        children_html = "".join(render_node(child) for child in node.children)
        return f"<{node.tag}{attrs}>{children_html}</{node.tag}>"
    if isinstance(node, Raw):
        return str(node)
    return escape(str(node))


def render_document(head: Element, body: Element, *, lang: str = "en") -> str:
    """Render a complete HTML5 document."""
    return "<!DOCTYPE html>\n" + render_node(el("html", head, body, lang=lang)) + "\n"
