"""Namespace filter state shared by every data query."""

from __future__ import annotations

from dataclasses import dataclass, field

from ktwins.constants.values import ALL_NAMESPACES_LABEL


def is_all_namespaces(namespace_filter: str) -> bool:
    """Return True when the filter denotes all namespaces ("" or "all")."""
    trimmed = (namespace_filter or "").strip()
    return not trimmed or trimmed.lower() == "all"


def display_namespace(namespace_filter: str) -> str:
    """Human label for a filter value."""
    if not (namespace_filter or "").strip():
        return ALL_NAMESPACES_LABEL
    return namespace_filter


@dataclass
class NamespaceContext:
    """Current namespace filter plus the last rendered namespace index.

    ``names[0]`` is reserved for "all namespaces". The table is only as fresh
    as the last refresh commit and is always replaced as a whole.
    """

    filter: str = ""
    names: list[str] = field(default_factory=lambda: [""])

    @property
    def is_all(self) -> bool:
        return is_all_namespaces(self.filter)

    def replace_names(self, names: list[str]) -> None:
        self.names = list(names) if names else [""]

    def select(self, index: int) -> bool:
        """Switch the filter to ``names[index]``.

        Returns:
            True when the index was in range and the filter was applied.
        """
        if index < 0 or index >= len(self.names):
            return False
        self.filter = self.names[index].strip()
        return True
