"""Helpers for space-delimited configuration and command paths."""

from typing import Any, Sequence


def split_path(path: str) -> list[str]:
    """Split a path like ``"system host-name"`` on single spaces.

    There is no escaping, so a segment can never contain a space.
    """
    return path.split(" ")


def unwrap_show(path: Sequence[str], data: Any) -> Any:
    """Return ``data[last]`` when the last path segment is a key of ``data``.

    Lets a leaf query such as ``system host-name`` yield the scalar instead
    of ``{"host-name": ...}``. A node with a child named after its own last
    segment is unwrapped as well.
    """
    if not path or not isinstance(data, dict):
        return data
    terminal = path[-1]
    if terminal in data:
        return data[terminal]
    return data
