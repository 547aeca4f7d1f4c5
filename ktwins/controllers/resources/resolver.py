"""Resource resolver - recovers (kind, name, namespace) from rendered rows.

Panels show plain kubectl tables, so the identity of a selected row is read
back from its columns. With all namespaces selected kubectl prepends a
NAMESPACE column; cluster-scoped kinds never carry one. Every function here
returns ``""`` (or ``None``) for input it cannot make sense of.
"""

from __future__ import annotations

from collections.abc import Sequence

from ktwins.constants.resources import CLUSTER_SCOPED_KINDS
from ktwins.models.core.panel import PanelSpec
from ktwins.models.core.snapshot import ResourceRef
from ktwins.models.state.namespace_context import is_all_namespaces


def resolve_kind(spec: PanelSpec, lines: Sequence[str], index: int) -> str:
    """Kind of the row at ``index``.

    Single-kind panels answer directly; grouped panels walk upward to the
    nearest group title line.
    """
    if index < 0 or index >= len(lines):
        return ""
    if spec.fixed_kind:
        return spec.fixed_kind
    group_kinds = spec.group_kinds
    for position in range(index, -1, -1):
        kind = group_kinds.get(lines[position].strip())
        if kind:
            return kind
    return ""


def _is_cluster_scoped(spec: PanelSpec, kind: str) -> bool:
    return spec.cluster_scoped or kind in CLUSTER_SCOPED_KINDS


def resolve_name(
    spec: PanelSpec,
    line: str,
    namespace_filter: str,
    kind: str = "",
) -> str:
    """Resource name from a rendered row."""
    fields = line.split()
    if not fields:
        return ""
    if _is_cluster_scoped(spec, kind) or not is_all_namespaces(namespace_filter):
        return fields[0]
    return fields[1] if len(fields) >= 2 else ""


def resolve_namespace(
    spec: PanelSpec,
    line: str,
    namespace_filter: str,
    kind: str = "",
) -> str:
    """Namespace of a rendered row; ``""`` for cluster-scoped resources."""
    fields = line.split()
    if not fields or _is_cluster_scoped(spec, kind):
        return ""
    if is_all_namespaces(namespace_filter):
        return fields[0]
    return namespace_filter.strip()


def resolve_resource(
    spec: PanelSpec,
    lines: Sequence[str],
    index: int,
    namespace_filter: str,
) -> ResourceRef | None:
    """Full identity of the row at ``index``, or None when no name resolves."""
    if index < 0 or index >= len(lines):
        return None
    line = lines[index]
    kind = resolve_kind(spec, lines, index)
    name = resolve_name(spec, line, namespace_filter, kind)
    if not name:
        return None
    return ResourceRef(
        kind=kind,
        name=name,
        namespace=resolve_namespace(spec, line, namespace_filter, kind),
    )
