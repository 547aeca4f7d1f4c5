"""Row selection and identity helpers for rendered resource panels."""

from ktwins.controllers.resources.resolver import (
    resolve_kind,
    resolve_name,
    resolve_namespace,
    resolve_resource,
)
from ktwins.controllers.resources.row_parser import (
    find_selectable,
    is_selectable,
    is_selectable_line,
)

__all__ = [
    "find_selectable",
    "is_selectable",
    "is_selectable_line",
    "resolve_kind",
    "resolve_name",
    "resolve_namespace",
    "resolve_resource",
]
