"""Per-kind status snapshots used for health classification.

Each snapshot holds only the fields its classifier needs and is built from a
raw API item with ``from_item``. Missing fields fall back to the defaults the
API server would apply.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .kubernetes import K8sResource, OwnerReference


class Snapshot(BaseModel):
    """Common identity fields."""

    model_config = ConfigDict(frozen=True)

    namespace: str = ""
    name: str = ""

    @property
    def ref(self) -> str:
        """namespace/name as printed in reports."""
        return f"{self.namespace}/{self.name}"


class Condition(BaseModel):
    """Status condition shared by pods and nodes."""

    model_config = ConfigDict(frozen=True)

    type: str
    status: str = "Unknown"
    reason: str = ""
    message: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Condition":
        return cls(
            type=data.get("type", ""),
            status=data.get("status", "Unknown"),
            reason=data.get("reason") or "",
            message=data.get("message") or "",
        )


def _conditions(status: Dict[str, Any]) -> List[Condition]:
    return [Condition.from_dict(c) for c in status.get("conditions") or []]


class ContainerWaiting(BaseModel):
    model_config = ConfigDict(frozen=True)

    reason: str = ""


class ContainerTerminated(BaseModel):
    model_config = ConfigDict(frozen=True)

    exit_code: int = 0
    reason: str = ""


class ContainerStatus(BaseModel):
    """State of one container in a pod."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    waiting: Optional[ContainerWaiting] = None
    terminated: Optional[ContainerTerminated] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContainerStatus":
        state = data.get("state") or {}
        waiting = state.get("waiting")
        terminated = state.get("terminated")
        return cls(
            name=data.get("name", ""),
            waiting=ContainerWaiting(reason=waiting.get("reason") or "")
            if waiting is not None
            else None,
            terminated=ContainerTerminated(
                exit_code=terminated.get("exitCode") or 0,
                reason=terminated.get("reason") or "",
            )
            if terminated is not None
            else None,
        )


class PodSnapshot(Snapshot):
    phase: str = ""
    reason: str = ""
    conditions: List[Condition] = Field(default_factory=list)
    init_container_statuses: List[ContainerStatus] = Field(default_factory=list)
    container_statuses: List[ContainerStatus] = Field(default_factory=list)

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "PodSnapshot":
        resource = K8sResource.from_item(item)
        status = resource.status_dict
        return cls(
            namespace=resource.namespace or "",
            name=resource.name,
            phase=status.get("phase") or "",
            reason=status.get("reason") or "",
            conditions=_conditions(status),
            init_container_statuses=[
                ContainerStatus.from_dict(cs) for cs in status.get("initContainerStatuses") or []
            ],
            container_statuses=[
                ContainerStatus.from_dict(cs) for cs in status.get("containerStatuses") or []
            ],
        )


class NodeSnapshot(Snapshot):
    labels: Dict[str, str] = Field(default_factory=dict)
    conditions: List[Condition] = Field(default_factory=list)

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "NodeSnapshot":
        resource = K8sResource.from_item(item)
        return cls(
            name=resource.name,
            labels=resource.labels,
            conditions=_conditions(resource.status_dict),
        )


class DeploymentSnapshot(Snapshot):
    replicas: Optional[int] = None
    available_replicas: int = 0
    unavailable_replicas: int = 0

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "DeploymentSnapshot":
        resource = K8sResource.from_item(item)
        status = resource.status_dict
        return cls(
            namespace=resource.namespace or "",
            name=resource.name,
            replicas=resource.spec_dict.get("replicas"),
            available_replicas=status.get("availableReplicas") or 0,
            unavailable_replicas=status.get("unavailableReplicas") or 0,
        )


class ReplicaSetSnapshot(Snapshot):
    replicas: Optional[int] = None
    ready_replicas: int = 0
    owner_references: List[OwnerReference] = Field(default_factory=list)

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "ReplicaSetSnapshot":
        resource = K8sResource.from_item(item)
        return cls(
            namespace=resource.namespace or "",
            name=resource.name,
            replicas=resource.spec_dict.get("replicas"),
            ready_replicas=resource.status_dict.get("readyReplicas") or 0,
            owner_references=resource.owner_references,
        )


class ServiceSnapshot(Snapshot):
    type: str = "ClusterIP"
    cluster_ip: str = ""
    selector: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "ServiceSnapshot":
        resource = K8sResource.from_item(item)
        spec = resource.spec_dict
        return cls(
            namespace=resource.namespace or "",
            name=resource.name,
            type=spec.get("type") or "ClusterIP",
            cluster_ip=spec.get("clusterIP") or "",
            selector=spec.get("selector") or {},
        )


class Endpoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    addresses: List[str] = Field(default_factory=list)
    ready: bool = False


class EndpointSliceSnapshot(Snapshot):
    endpoints: List[Endpoint] = Field(default_factory=list)

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "EndpointSliceSnapshot":
        resource = K8sResource.from_item(item)
        # EndpointSlice keeps its endpoints at the top level, not under spec/status
        endpoints = [
            Endpoint(
                addresses=list(ep.get("addresses") or []),
                ready=(ep.get("conditions") or {}).get("ready") is True,
            )
            for ep in item.get("endpoints") or []
        ]
        return cls(namespace=resource.namespace or "", name=resource.name, endpoints=endpoints)


class PVCSnapshot(Snapshot):
    phase: str = ""

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "PVCSnapshot":
        resource = K8sResource.from_item(item)
        return cls(
            namespace=resource.namespace or "",
            name=resource.name,
            phase=resource.status_dict.get("phase") or "",
        )
