"""Controllers module for ktwins.

This module provides the cluster data source and the helpers that read
resource identity back out of rendered panel text.
"""

from __future__ import annotations

# Base classes
from ktwins.controllers.base import ClusterDataSource

# Cluster domain
from ktwins.controllers.cluster.command_runner import CommandResult, CommandRunner
from ktwins.controllers.cluster.controller import ClusterController

__all__ = [
    # Base
    "ClusterDataSource",
    # Cluster domain
    "ClusterController",
    "CommandResult",
    "CommandRunner",
]
