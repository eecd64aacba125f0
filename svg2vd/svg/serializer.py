"""Write Vector Drawable XML from the output node tree."""

from __future__ import annotations

from xml.sax.saxutils import escape

from svg2vd.models.drawable import DrawableNode, VectorNode

XML_HEADER = '<?xml version="1.0" encoding="utf-8"?>'
INDENT = "    "

_ATTR_ENTITIES = {'"': "&quot;"}


def serialize_vector(root: VectorNode) -> str:
    """Render the whole document, header included, with a trailing newline."""
    lines = [XML_HEADER]
    _render(root, 0, lines)
    return "\n".join(lines) + "\n"


def _render(node: DrawableNode, depth: int, lines: list[str]) -> None:
    pad = INDENT * depth
    attrs = [f'{name}="{escape(value, _ATTR_ENTITIES)}"' for name, value in node.attributes()]
    children = node.children()

    # One attribute (or none) stays on the tag line; more get one line each.
    if len(attrs) <= 1:
        opening = f"<{node.tag}" + "".join(f" {a}" for a in attrs)
        if children:
            lines.append(f"{pad}{opening}>")
        else:
            lines.append(f"{pad}{opening} />")
    else:
        lines.append(f"{pad}<{node.tag}")
        attr_pad = pad + INDENT
        for a in attrs[:-1]:
            lines.append(f"{attr_pad}{a}")
        closer = ">" if children else " />"
        lines.append(f"{attr_pad}{attrs[-1]}{closer}")

    if children:
        for child in children:
            _render(child, depth + 1, lines)
        lines.append(f"{pad}</{node.tag}>")
