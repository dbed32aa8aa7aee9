"""Per-kind resource listers.

Each lister lists one scope (a namespace, or all namespaces when ``namespace``
is None), classifies every item, writes a line per unhealthy item to the sink
and returns the number of unhealthy items. Listing failures propagate as
``K8sAPIError``.
"""

from collections import defaultdict
from typing import Callable, Dict, List, Optional, Sequence

from ..core.sink import ReportSink
from ..health import (
    classify_deployment,
    classify_node,
    classify_pod,
    classify_pvc,
    classify_replicaset,
    classify_service,
    node_group,
    service_needs_endpoints,
)
from ..health.rules import SERVICE_NAME_LABEL
from ..model.report import Finding
from ..model.snapshots import (
    DeploymentSnapshot,
    EndpointSliceSnapshot,
    NodeSnapshot,
    PodSnapshot,
    PVCSnapshot,
    ReplicaSetSnapshot,
    ServiceSnapshot,
)
from ..utils.logger import get_logger
from .client import K8sClient
from .errors import K8sError

logger = get_logger(__name__)

CheckFunc = Callable[[K8sClient, Optional[str], ReportSink], int]


def _report(sink: ReportSink, kind: str, ref: str, reason: str, extra: Optional[str] = None):
    namespace, _, name = ref.partition("/")
    if extra is not None:
        line = f"  {ref:<50} {extra:<12} {reason}"
    else:
        line = f"  {ref:<50} {reason}"
    sink.finding(Finding(kind=kind, namespace=namespace, name=name, reason=reason, extra=extra), line)


def check_pods(client: K8sClient, namespace: Optional[str], sink: ReportSink) -> int:
    """List pods that are not running successfully."""
    bad = 0
    for item in client.list_items("pods", namespace=namespace):
        pod = PodSnapshot.from_item(item)
        verdict = classify_pod(pod)
        if not verdict.healthy:
            bad += 1
            _report(sink, "Pod", pod.ref, verdict.reason, extra=pod.phase)
    return bad


def check_deployments(client: K8sClient, namespace: Optional[str], sink: ReportSink) -> int:
    """List deployments with unavailable replicas."""
    bad = 0
    for item in client.list_items("deployments", namespace=namespace):
        deployment = DeploymentSnapshot.from_item(item)
        verdict = classify_deployment(deployment)
        if not verdict.healthy:
            bad += 1
            _report(sink, "Deployment", deployment.ref, verdict.reason)
    return bad


def check_replicasets(client: K8sClient, namespace: Optional[str], sink: ReportSink) -> int:
    """List orphaned or under-replicated replicasets."""
    bad = 0
    for item in client.list_items("replicasets", namespace=namespace):
        rs = ReplicaSetSnapshot.from_item(item)
        verdict = classify_replicaset(rs)
        if not verdict.healthy:
            bad += 1
            _report(sink, "ReplicaSet", rs.ref, verdict.reason)
    return bad


def _endpoint_slices(
    client: K8sClient, service: ServiceSnapshot
) -> Optional[List[EndpointSliceSnapshot]]:
    try:
        items = client.list_items(
            "endpointslices",
            namespace=service.namespace,
            label_selector=f"{SERVICE_NAME_LABEL}={service.name}",
        )
    except K8sError as e:
        logger.debug(f"Endpoint lookup failed for {service.ref}: {e}")
        return None
    return [EndpointSliceSnapshot.from_item(item) for item in items]


def check_services(client: K8sClient, namespace: Optional[str], sink: ReportSink) -> int:
    """List services without ready endpoints."""
    bad = 0
    for item in client.list_items("services", namespace=namespace):
        service = ServiceSnapshot.from_item(item)
        slices = _endpoint_slices(client, service) if service_needs_endpoints(service) else []
        verdict = classify_service(service, slices)
        if not verdict.healthy:
            bad += 1
            _report(sink, "Service", service.ref, verdict.reason)
    return bad


def check_pvcs(client: K8sClient, namespace: Optional[str], sink: ReportSink) -> int:
    """List PersistentVolumeClaims that are not Bound."""
    bad = 0
    for item in client.list_items("persistentvolumeclaims", namespace=namespace):
        pvc = PVCSnapshot.from_item(item)
        verdict = classify_pvc(pvc)
        if not verdict.healthy:
            bad += 1
            _report(sink, "PersistentVolumeClaim", pvc.ref, verdict.reason)
    return bad


def check_nodes(
    client: K8sClient, sink: ReportSink, label_keys: Optional[Sequence[str]] = None
) -> int:
    """List nodes that are not Ready, grouped by node group."""
    grouped: Dict[str, List[tuple]] = defaultdict(list)
    for item in client.list_items("nodes", namespaced=False):
        node = NodeSnapshot.from_item(item)
        verdict = classify_node(node)
        if not verdict.healthy:
            grouped[node_group(node, label_keys)].append((node.name, verdict.reason))

    bad = 0
    for group in sorted(grouped):
        nodes = grouped[group]
        bad += len(nodes)
        sink.line(f"  [{group}] ({len(nodes)} node(s))")
        for name, reason in nodes:
            sink.finding(
                Finding(kind="Node", name=name, reason=reason, group=group),
                f"    {name:<50} {reason}",
            )
    return bad
