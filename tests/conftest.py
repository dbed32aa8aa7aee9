"""Test configuration and fixtures."""

import io
from typing import Any, Dict, List, Optional

import pytest
from unittest.mock import Mock
from rich.console import Console

from kubectl_bad.core.sink import ReportSink
from kubectl_bad.k8s.client import K8sClient


def pod_item(
    name: str,
    namespace: str = "default",
    phase: str = "Running",
    container_statuses: Optional[List[Dict[str, Any]]] = None,
    init_container_statuses: Optional[List[Dict[str, Any]]] = None,
    conditions: Optional[List[Dict[str, Any]]] = None,
    reason: Optional[str] = None,
) -> Dict[str, Any]:
    status: Dict[str, Any] = {"phase": phase}
    if container_statuses is not None:
        status["containerStatuses"] = container_statuses
    if init_container_statuses is not None:
        status["initContainerStatuses"] = init_container_statuses
    if conditions is not None:
        status["conditions"] = conditions
    if reason is not None:
        status["reason"] = reason
    return {
        "apiVersion": "v1",
        "kind": "Pod",
        "metadata": {"name": name, "namespace": namespace},
        "status": status,
    }


def waiting(reason: str, name: str = "app") -> Dict[str, Any]:
    return {"name": name, "state": {"waiting": {"reason": reason}}}


def terminated(exit_code: int, reason: str = "", name: str = "app") -> Dict[str, Any]:
    return {"name": name, "state": {"terminated": {"exitCode": exit_code, "reason": reason}}}


def node_item(
    name: str,
    ready: Optional[str] = "True",
    labels: Optional[Dict[str, str]] = None,
    reason: str = "",
    message: str = "",
) -> Dict[str, Any]:
    conditions = []
    if ready is not None:
        conditions.append({"type": "Ready", "status": ready, "reason": reason, "message": message})
    return {
        "kind": "Node",
        "metadata": {"name": name, "labels": labels or {}},
        "status": {"conditions": conditions},
    }


def service_item(
    name: str,
    namespace: str = "default",
    type: str = "ClusterIP",
    cluster_ip: str = "10.0.0.1",
    selector: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    return {
        "kind": "Service",
        "metadata": {"name": name, "namespace": namespace},
        "spec": {
            "type": type,
            "clusterIP": cluster_ip,
            "selector": {"app": name} if selector is None else selector,
        },
    }


def endpoint_slice_item(name: str, ready: int = 0, not_ready: int = 0) -> Dict[str, Any]:
    endpoints = []
    for i in range(ready):
        endpoints.append({"addresses": [f"10.1.0.{i}"], "conditions": {"ready": True}})
    for i in range(not_ready):
        endpoints.append({"addresses": [f"10.2.0.{i}"], "conditions": {"ready": False}})
    return {
        "kind": "EndpointSlice",
        "metadata": {"name": f"{name}-abcde", "namespace": "default"},
        "endpoints": endpoints,
    }


@pytest.fixture
def mock_client():
    """Mock kubectl client with no resources."""
    client = Mock(spec=K8sClient)
    client.list_items = Mock(return_value=[])
    client.list_namespaces = Mock(return_value=[])
    client.get_server_version = Mock(return_value="v1.29.2")
    return client


@pytest.fixture
def console():
    """Console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def sink(console):
    return ReportSink(console)


def output_of(console: Console) -> str:
    return console.file.getvalue()
