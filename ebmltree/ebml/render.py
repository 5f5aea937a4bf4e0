"""
Diagnostic text rendering of element trees.

One line per node: hex ID, registry name, declared size and, for
non-container elements, the decoded value. Children are indented below
their container.
"""

from ebmltree.configs import settings
from ebmltree.ebml.errors import EBMLError
from ebmltree.ebml.registry import ElementKind

_INDENT = "  "


def hex_dump(data: bytes, max_bytes: int | None = None) -> str:
    """Space-separated hex octets, truncated after ``max_bytes``."""
    limit = settings.render_max_bytes if max_bytes is None else max_bytes
    if len(data) <= limit:
        return data.hex(" ")
    shown = data[:limit].hex(" ")
    return f"{shown} ... (+{len(data) - limit} bytes)" if shown else f"... ({len(data)} bytes)"


def format_value(element, max_bytes: int | None = None) -> str | None:
    """Text form of an element's decoded payload, or None for containers."""
    kind = element.kind
    if kind is ElementKind.CONTAINER:
        return None
    if kind in (ElementKind.BINARY, ElementKind.UNKNOWN):
        return hex_dump(element.data.to_bytes(), max_bytes)
    try:
        return str(element.value())
    except EBMLError:
        # Undecodable payloads are shown raw
        return f"{hex_dump(element.data.to_bytes(), max_bytes)} (invalid {kind.value})"


def render_line(element, max_bytes: int | None = None) -> str:
    line = f"0x{element.id:X} {element.name} size={element.size}"
    value = format_value(element, max_bytes)
    if value is not None:
        line += f" value={value}"
    return line


def render_node(node, indent: int = 0, max_bytes: int | None = None) -> str:
    """Render a node and its subtree, one element per line."""
    lines = []
    pending = [(node, indent)]
    while pending:
        current, depth = pending.pop()
        lines.append(_INDENT * depth + render_line(current.element, max_bytes))
        pending.extend((child, depth + 1) for child in reversed(current.children))
    return "\n".join(lines)
