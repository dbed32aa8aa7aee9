"""Per-kind health classification."""

from .classifiers import (
    classify_deployment,
    classify_node,
    classify_pod,
    classify_pvc,
    classify_replicaset,
    classify_service,
    node_group,
    service_needs_endpoints,
)

__all__ = [
    "classify_deployment",
    "classify_node",
    "classify_pod",
    "classify_pvc",
    "classify_replicaset",
    "classify_service",
    "node_group",
    "service_needs_endpoints",
]
