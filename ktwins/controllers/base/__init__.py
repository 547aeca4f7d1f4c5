"""Base controller contracts."""

from ktwins.controllers.base.base_controller import ClusterDataSource

__all__ = ["ClusterDataSource"]
