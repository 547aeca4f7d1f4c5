"""Resource group model - one titled block of kubectl output inside a panel."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ResourceGroup:
    """A kubectl resource listing rendered under an upper-case group title.

    Attributes:
        kind: kubectl resource argument, also used as the describe kind.
        title: Group title line written above the listing.
        namespaced: Whether the namespace selector applies to the query.
        max_lines: Optional clamp on the rendered listing.
    """

    kind: str
    title: str
    namespaced: bool = True
    max_lines: int | None = None
