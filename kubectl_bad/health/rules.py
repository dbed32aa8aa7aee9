"""Constants used by the health classifiers."""

from typing import List

# Waiting reasons that mean a container will not start on its own
CONTAINER_FAILURE_REASONS = frozenset(
    {
        "CrashLoopBackOff",
        "ImagePullBackOff",
        "ErrImagePull",
        "CreateContainerConfigError",
        "InvalidImageName",
        "CreateContainerError",
    }
)

# Common node-group label keys across managed Kubernetes providers, first match wins
DEFAULT_NODE_GROUP_LABELS: List[str] = [
    "eks.amazonaws.com/nodegroup",  # EKS managed
    "karpenter.sh/nodepool",  # Karpenter
    "cloud.google.com/gke-nodepool",  # GKE
    "agentpool",  # AKS
    "node.kubernetes.io/instance-type",  # fallback: instance type
    "kubernetes.azure.com/agentpool",  # AKS (alternative)
    "alpha.eksctl.io/nodegroup-name",  # eksctl
]

UNGROUPED = "(ungrouped)"

SERVICE_NAME_LABEL = "kubernetes.io/service-name"
