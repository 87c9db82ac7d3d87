"""Flattener: Value tree → single-level mapping of dotted/indexed keys."""

from __future__ import annotations

from .values import Value, VArray, VObject, VString, _Null


def flatten(node: Value) -> dict[str, str]:
    """Flatten *node* into a new ordered ``{path: text}`` dict.

    Object members become ``parent.name``, array elements ``parent[i]``.
    Strings keep their literal content, null becomes ``""`` and every
    other scalar its textual form. Objects and arrays produce no entry of
    their own, so an empty document yields ``{}``.

    Example::

        flatten(parse_hjson('{"a": "x", "b": {"c": [1, 2]}}'))
        → {"a": "x", "b.c[0]": "1", "b.c[1]": "2"}
    """
    result: dict[str, str] = {}
    build_flattened_map(result, node)
    return result


def build_flattened_map(
    result: dict[str, str], node: Value, root: str | None = None
) -> None:
    """Add one entry to *result* per leaf under *node*, prefixed by *root*."""
    if isinstance(node, VObject):
        for name, child in node.members:
            build_flattened_map(result, child, name if root is None else f"{root}.{name}")
        return

    if isinstance(node, VArray):
        # No leading segment for a root-level array: keys are "[0]", "[1]", ...
        prefix = "" if root is None else root
        for index, child in enumerate(node.items):
            build_flattened_map(result, child, f"{prefix}[{index}]")
        return

    key = "" if root is None else root
    if isinstance(node, VString):
        result[key] = node.value
    elif isinstance(node, _Null):
        result[key] = ""
    else:
        result[key] = str(node)
