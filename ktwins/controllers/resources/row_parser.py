"""Row parser - decides which rendered panel lines are selectable resource rows."""

from __future__ import annotations

from collections.abc import Sequence

from ktwins.constants.limits import MAX_TITLE_TOKEN_LENGTH
from ktwins.constants.values import NO_RESOURCES_FOUND, TABLE_HEADER_TOKEN
from ktwins.models.core.panel import PanelSpec

_NO_RESOURCES_LOWER = NO_RESOURCES_FOUND.lower()


def is_selectable_line(line: str, min_fields: int = 2) -> bool:
    """Return True when ``line`` looks like a resource row.

    Rejected: blank lines, lines written entirely in upper case (group titles
    and column headers), ``No resources found`` messages, rows starting with
    the ``NAME`` header token, and short single upper-case tokens. Rows must
    also carry at least ``min_fields`` whitespace-separated fields.
    """
    trimmed = line.strip()
    if not trimmed:
        return False
    if trimmed.upper() == trimmed:
        return False
    fields = trimmed.split()
    if _NO_RESOURCES_LOWER in " ".join(fields).lower():
        return False
    first = fields[0]
    if first == TABLE_HEADER_TOKEN:
        return False
    if len(fields) == 1 and first.upper() == first and len(first) <= MAX_TITLE_TOKEN_LENGTH:
        return False
    return len(fields) >= max(1, min_fields)


def is_selectable(spec: PanelSpec, lines: Sequence[str], index: int) -> bool:
    """Selectability of ``lines[index]`` under the rule of panel ``spec``."""
    if index < 0 or index >= len(lines):
        return False
    return is_selectable_line(lines[index], spec.min_fields)


def find_selectable(
    spec: PanelSpec,
    lines: Sequence[str],
    start: int,
    delta: int,
    *,
    wrap: bool,
) -> int:
    """Search for a selectable line beginning at ``start`` and stepping ``delta``.

    With ``wrap`` the search visits every line once, jumping to the opposite
    end when it runs off either side. Without it the search stops at the edge.

    Returns:
        The index found, or -1.
    """
    total = len(lines)
    if total == 0 or delta == 0:
        return -1

    if wrap:
        index = start
        for _ in range(total):
            if index < 0:
                index = total - 1
            elif index >= total:
                index = 0
            if is_selectable(spec, lines, index):
                return index
            index += delta
        return -1

    index = start
    while 0 <= index < total:
        if is_selectable(spec, lines, index):
            return index
        index += delta
    return -1
