"""kubectl output parser - turns raw command text into panel text."""

from __future__ import annotations

from collections import Counter
from collections.abc import Collection, Iterable, Mapping

from ktwins.constants.limits import MAX_ALERTS, MAX_EVENT_LINES
from ktwins.constants.resources import ALERT_POD_STATUSES, NAME_PREFIX_TO_KIND
from ktwins.constants.values import (
    ALERT_MARKER,
    ALL_NAMESPACES_LABEL,
    LOWER_BOUND_MARKER,
    NO_RESOURCES_FOUND,
)


def clamp_lines(text: str, max_lines: int | None) -> str:
    """Keep at most the first ``max_lines`` lines of ``text``."""
    lines = text.rstrip("\n").split("\n")
    if max_lines is None or len(lines) <= max_lines:
        return "\n".join(lines)
    return "\n".join(lines[:max_lines])


def tail_lines(text: str, max_lines: int) -> str:
    """Keep at most the last ``max_lines`` lines of ``text``."""
    lines = text.strip().split("\n")
    if len(lines) > max_lines:
        lines = lines[-max_lines:]
    return "\n".join(lines).strip()


class KubectlOutputParser:
    """Parses plain kubectl table output into dashboard panel text."""

    _METRICS_FAILURE_TOKENS = ("error", "timeout", "unavailable")

    @staticmethod
    def is_empty_listing(output: str) -> bool:
        """Return True when a ``kubectl get`` listing has nothing to show."""
        return not output.strip() or NO_RESOURCES_FOUND in output

    @staticmethod
    def render_groups(blocks: Iterable[tuple[str, str]]) -> str:
        """Join ``(title, listing)`` pairs into one grouped panel text."""
        parts = [f"{title}\n{listing}\n\n" for title, listing in blocks if listing]
        return "".join(parts).strip()

    @staticmethod
    def count_names(output: str) -> Counter[str]:
        """Count ``kubectl get -o name`` lines per summary kind.

        Lines look like ``deployment.apps/web``; anything else (errors, the
        timeout marker) is ignored.
        """
        counts: Counter[str] = Counter()
        for line in output.splitlines():
            resource, sep, _name = line.strip().partition("/")
            if not sep:
                continue
            kind = NAME_PREFIX_TO_KIND.get(resource.split(".", 1)[0])
            if kind:
                counts[kind] += 1
        return counts

    @staticmethod
    def render_summary(
        namespace_filter: str,
        counts: Mapping[str, int],
        *,
        lower_bounds: Collection[str] = (),
    ) -> str:
        """Render the seven-line overview of resource counts.

        Kinds in ``lower_bounds`` were counted from capped output and are
        shown as at-least values, e.g. ``pods ≥2898``.
        """
        display_ns = namespace_filter.strip() or ALL_NAMESPACES_LABEL

        def c(kind: str) -> str:
            count = counts.get(kind, 0)
            return f"{LOWER_BOUND_MARKER}{count}" if kind in lower_bounds else str(count)

        lines = [
            f"NS {display_ns:<10}".rstrip(),
            f"infra nodes:{c('nodes')} crd:{c('crd')}",
            f"config sec:{c('secrets')} cm:{c('configmaps')} sa:{c('serviceaccounts')}",
            f"net svc:{c('svc')} ing:{c('ingress')} ep:{c('endpoints')}",
            f"storage pvc:{c('pvc')} pv:{c('pv')}",
            (
                f"workloads d:{c('deploy')} rs:{c('rs')} sts:{c('sts')} "
                f"ds:{c('ds')} jobs:{c('jobs')} cj:{c('cronjobs')}"
            ),
            f"pods {c('pods')}",
        ]
        return "\n".join(lines)

    @staticmethod
    def parse_namespaces(output: str) -> tuple[str, list[str]]:
        """Parse ``kubectl get ns --no-headers`` into the quick-select index.

        Returns:
            ``("0) ALL\\n1) name\\n...", ["", "name", ...])``.
        """
        names = [""]
        rendered = [f"0) {ALL_NAMESPACES_LABEL}"]
        for line in output.strip().split("\n"):
            fields = line.split()
            if not fields:
                continue
            names.append(fields[0])
            rendered.append(f"{len(names) - 1}) {fields[0]}")
        return "\n".join(rendered) + "\n", names

    @staticmethod
    def parse_alerts(
        output: str,
        *,
        all_namespaces: bool,
        limit: int = MAX_ALERTS,
    ) -> str:
        """Extract pods in a failing phase from ``kubectl get pods --no-headers``.

        With ``-A`` the first column is the namespace, which shifts the status
        column right by one.
        """
        status_index = 3 if all_namespaces else 2
        alerts: list[str] = []
        for line in output.split("\n"):
            fields = line.split()
            if len(fields) <= status_index:
                continue
            status = fields[status_index]
            if status not in ALERT_POD_STATUSES:
                continue
            name = f"{fields[0]}/{fields[1]}" if all_namespaces else fields[0]
            alerts.append(f"{ALERT_MARKER} {name}: {status}")
            if len(alerts) >= limit:
                break
        return "\n".join(alerts)

    @staticmethod
    def parse_events(output: str, max_lines: int = MAX_EVENT_LINES) -> str:
        """Keep the newest ``max_lines`` lines of an events listing."""
        if NO_RESOURCES_FOUND in output:
            return ""
        return tail_lines(output, max_lines)

    @classmethod
    def parse_metrics(cls, output: str) -> str:
        """Return ``kubectl top`` output, or ``""`` when metrics are unavailable."""
        if not output.strip():
            return ""
        lowered = output.lower()
        if any(token in lowered for token in cls._METRICS_FAILURE_TOKENS):
            return ""
        return output.rstrip("\n")
