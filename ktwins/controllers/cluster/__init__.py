"""Init file for cluster module."""

from ktwins.controllers.cluster.command_runner import (
    CommandResult,
    CommandRunner,
    namespace_selector,
)
from ktwins.controllers.cluster.controller import ClusterController
from ktwins.controllers.cluster.parsers import KubectlOutputParser

__all__ = [
    "ClusterController",
    "CommandResult",
    "CommandRunner",
    "KubectlOutputParser",
    "namespace_selector",
]
