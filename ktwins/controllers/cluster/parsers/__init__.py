"""Parsers for kubectl output."""

from ktwins.controllers.cluster.parsers.kubectl_output import (
    KubectlOutputParser,
    clamp_lines,
    tail_lines,
)

__all__ = ["KubectlOutputParser", "clamp_lines", "tail_lines"]
