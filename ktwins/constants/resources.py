"""Resource group tables shared by the data source and the resolver.

Each grouped panel renders its groups in the declared order, and the resolver
maps the same titles back to kinds, so both sides read from these tuples.
"""

from typing import Final

from ktwins.constants.limits import MAX_GROUP_LINES
from ktwins.models.core.resource_group import ResourceGroup

WORKLOAD_GROUPS: Final = (
    ResourceGroup("deploy", "DEPLOY", max_lines=MAX_GROUP_LINES),
    ResourceGroup("rs", "RS", max_lines=MAX_GROUP_LINES),
    ResourceGroup("sts", "STS", max_lines=MAX_GROUP_LINES),
    ResourceGroup("ds", "DS", max_lines=MAX_GROUP_LINES),
    ResourceGroup("jobs", "JOBS", max_lines=MAX_GROUP_LINES),
    ResourceGroup("cronjobs", "CRONJOBS", max_lines=MAX_GROUP_LINES),
)

CONFIG_GROUPS: Final = (
    ResourceGroup("secrets", "SECRETS"),
    ResourceGroup("configmaps", "CONFIGMAPS"),
    ResourceGroup("serviceaccounts", "SERVICEACCOUNTS"),
)

NETWORK_GROUPS: Final = (
    ResourceGroup("svc", "SVC"),
    ResourceGroup("ingress", "INGRESS"),
    ResourceGroup("endpoints", "ENDPOINTS"),
)

STORAGE_GROUPS: Final = (
    ResourceGroup("pvc", "PVC"),
    ResourceGroup("pv", "PV", namespaced=False),
)

INFRA_GROUPS: Final = (
    ResourceGroup("nodes", "NODES", namespaced=False),
    ResourceGroup("crd", "CRDS", namespaced=False),
)

# Kinds whose rows never carry a namespace column
CLUSTER_SCOPED_KINDS: Final = frozenset({"nodes", "pv", "crd"})

# Pod phases surfaced in the alerts panel
ALERT_POD_STATUSES: Final = frozenset(
    {
        "CrashLoopBackOff",
        "Error",
        "ImagePullBackOff",
        "ErrImagePull",
        "Pending",
        "CreateContainerError",
    }
)

# `kubectl get -o name` prefixes -> summary count keys
NAMESPACED_COUNT_KINDS: Final = (
    "deploy",
    "rs",
    "sts",
    "ds",
    "jobs",
    "cronjobs",
    "pods",
    "svc",
    "ingress",
    "endpoints",
    "pvc",
    "secrets",
    "configmaps",
    "serviceaccounts",
)
CLUSTER_COUNT_KINDS: Final = ("nodes", "pv", "crd")
NAME_PREFIX_TO_KIND: Final = {
    "deployment": "deploy",
    "replicaset": "rs",
    "statefulset": "sts",
    "daemonset": "ds",
    "job": "jobs",
    "cronjob": "cronjobs",
    "pod": "pods",
    "service": "svc",
    "ingress": "ingress",
    "endpoints": "endpoints",
    "persistentvolumeclaim": "pvc",
    "secret": "secrets",
    "configmap": "configmaps",
    "serviceaccount": "serviceaccounts",
    "node": "nodes",
    "persistentvolume": "pv",
    "customresourcedefinition": "crd",
}

__all__ = [
    "ALERT_POD_STATUSES",
    "CLUSTER_COUNT_KINDS",
    "CLUSTER_SCOPED_KINDS",
    "CONFIG_GROUPS",
    "INFRA_GROUPS",
    "NAMESPACED_COUNT_KINDS",
    "NAME_PREFIX_TO_KIND",
    "NETWORK_GROUPS",
    "STORAGE_GROUPS",
    "WORKLOAD_GROUPS",
]
