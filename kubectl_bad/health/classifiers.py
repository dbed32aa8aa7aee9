"""Health classification rules, one pure function per resource kind."""

from typing import Optional, Sequence

from ..model.snapshots import (
    DeploymentSnapshot,
    EndpointSliceSnapshot,
    NodeSnapshot,
    PodSnapshot,
    PVCSnapshot,
    ReplicaSetSnapshot,
    ServiceSnapshot,
)
from ..model.verdict import Verdict
from .rules import CONTAINER_FAILURE_REASONS, DEFAULT_NODE_GROUP_LABELS, UNGROUPED


def classify_pod(pod: PodSnapshot) -> Verdict:
    """Classify a pod from its phase and container states.

    Init containers are inspected before regular containers and the first
    container problem found wins over the pod phase.
    """
    # Completed pods (e.g. finished Jobs) are fine
    if pod.phase == "Succeeded":
        return Verdict.ok()

    for status in [*pod.init_container_statuses, *pod.container_statuses]:
        if status.waiting is not None and status.waiting.reason in CONTAINER_FAILURE_REASONS:
            return Verdict.unhealthy(status.waiting.reason)
        if status.terminated is not None and status.terminated.exit_code != 0:
            return Verdict.unhealthy(
                status.terminated.reason or f"exit {status.terminated.exit_code}"
            )

    if pod.phase == "Failed":
        return Verdict.unhealthy(pod.reason or "Failed")
    if pod.phase == "Pending":
        for condition in pod.conditions:
            if condition.type == "PodScheduled" and condition.status == "False":
                return Verdict.unhealthy(f"Unschedulable: {condition.message}")
        return Verdict.unhealthy("Pending")
    if pod.phase == "Unknown":
        return Verdict.unhealthy("Unknown")

    return Verdict.ok()


def classify_node(node: NodeSnapshot) -> Verdict:
    """Classify a node from its Ready condition."""
    for condition in node.conditions:
        if condition.type != "Ready":
            continue
        if condition.status == "True":
            return Verdict.ok()
        reason = condition.reason or "NotReady"
        if condition.message:
            reason = f"{reason}: {condition.message}"
        return Verdict.unhealthy(reason)

    return Verdict.unhealthy("NotReady (no condition)")


def node_group(node: NodeSnapshot, label_keys: Optional[Sequence[str]] = None) -> str:
    """Resolve the node group from the first matching label key."""
    keys = DEFAULT_NODE_GROUP_LABELS if label_keys is None else label_keys
    for key in keys:
        value = node.labels.get(key)
        if value:
            return value
    return UNGROUPED


def classify_deployment(deployment: DeploymentSnapshot) -> Verdict:
    desired = 1 if deployment.replicas is None else deployment.replicas
    available = deployment.available_replicas
    unavailable = deployment.unavailable_replicas

    if unavailable > 0 or available < desired:
        return Verdict.unhealthy(f"{available}/{desired} available, {unavailable} unavailable")
    return Verdict.ok()


def classify_replicaset(rs: ReplicaSetSnapshot) -> Verdict:
    """Classify a ReplicaSet, reporting orphans and under-replication.

    Under-replicated ReplicaSets controlled by a Deployment are left to the
    Deployment check so the same problem is not reported twice.
    """
    desired = rs.replicas or 0
    # Scaled-to-zero sets are old rollout remnants
    if desired == 0:
        return Verdict.ok()

    ready = rs.ready_replicas
    controllers = [ref for ref in rs.owner_references if ref.controller]

    if rs.owner_references and not controllers:
        return Verdict.unhealthy(f"orphaned (owner deleted), {ready}/{desired} ready")

    owned_by_deployment = any(ref.kind == "Deployment" for ref in controllers)
    if not owned_by_deployment and ready < desired:
        return Verdict.unhealthy(f"{ready}/{desired} ready")

    return Verdict.ok()


def service_needs_endpoints(service: ServiceSnapshot) -> bool:
    """Return False for services that are not expected to have endpoints."""
    if service.type == "ExternalName":
        return False
    # Headless without a selector: endpoints are managed by hand
    if service.cluster_ip == "None" and not service.selector:
        return False
    return True


def classify_service(
    service: ServiceSnapshot, slices: Optional[Sequence[EndpointSliceSnapshot]]
) -> Verdict:
    """Classify a service from the endpoint slices backing it.

    ``slices`` is None when the endpoint lookup failed.
    """
    if not service_needs_endpoints(service):
        return Verdict.ok()
    if slices is None:
        return Verdict.unhealthy("no endpoints (error fetching)")

    ready = 0
    not_ready = 0
    for endpoint_slice in slices:
        for endpoint in endpoint_slice.endpoints:
            if endpoint.ready:
                ready += len(endpoint.addresses)
            else:
                not_ready += len(endpoint.addresses)

    if ready == 0 and not_ready == 0:
        return Verdict.unhealthy("no endpoints")
    if ready == 0:
        return Verdict.unhealthy(f"0 ready endpoints ({not_ready} not ready)")
    return Verdict.ok()


def classify_pvc(pvc: PVCSnapshot) -> Verdict:
    # A claim the API server has not reported a phase for yet has nothing to flag
    if not pvc.phase or pvc.phase == "Bound":
        return Verdict.ok()
    # Pending, Lost and anything unexpected are reported by phase name
    return Verdict.unhealthy(pvc.phase)
