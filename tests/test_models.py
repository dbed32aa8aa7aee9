"""Test data models."""

import pytest
from pydantic import ValidationError

from conftest import pod_item, terminated, waiting
from kubectl_bad.model.kubernetes import K8sResource
from kubectl_bad.model.report import AggregateReport, KindReport, ReportFormat
from kubectl_bad.model.snapshots import (
    EndpointSliceSnapshot,
    PodSnapshot,
    ReplicaSetSnapshot,
    ServiceSnapshot,
)
from kubectl_bad.model.verdict import Verdict


@pytest.mark.unit
class TestK8sResource:
    def test_resource_from_item(self):
        """Test wrapping a raw API item."""
        resource = K8sResource.from_item(
            {
                "apiVersion": "v1",
                "kind": "Pod",
                "metadata": {"name": "test-pod", "namespace": "default"},
                "spec": {"containers": []},
            }
        )

        assert resource.name == "test-pod"
        assert resource.namespace == "default"
        assert resource.kind == "Pod"
        assert resource.status_dict == {}

    def test_owner_references(self):
        resource = K8sResource.from_item(
            {
                "metadata": {
                    "name": "rs",
                    "ownerReferences": [
                        {"kind": "Deployment", "name": "api", "controller": True},
                        {"kind": "Thing", "name": "other"},
                    ],
                }
            }
        )

        refs = resource.owner_references
        assert [(r.kind, r.controller) for r in refs] == [("Deployment", True), ("Thing", False)]

    def test_null_labels(self):
        resource = K8sResource.from_item({"metadata": {"name": "n", "labels": None}})
        assert resource.labels == {}


@pytest.mark.unit
class TestSnapshots:
    def test_pod_snapshot_preserves_container_order(self):
        snapshot = PodSnapshot.from_item(
            pod_item(
                "web",
                namespace="shop",
                init_container_statuses=[terminated(0, name="init")],
                container_statuses=[waiting("ErrImagePull", "a"), terminated(2, name="b")],
            )
        )

        assert snapshot.ref == "shop/web"
        assert [cs.name for cs in snapshot.init_container_statuses] == ["init"]
        assert [cs.name for cs in snapshot.container_statuses] == ["a", "b"]
        assert snapshot.container_statuses[0].waiting.reason == "ErrImagePull"
        assert snapshot.container_statuses[1].terminated.exit_code == 2

    def test_pod_snapshot_is_frozen(self):
        snapshot = PodSnapshot.from_item(pod_item("web"))
        with pytest.raises(ValidationError):
            snapshot.phase = "Failed"

    def test_replicaset_replicas_unset(self):
        snapshot = ReplicaSetSnapshot.from_item({"metadata": {"name": "rs"}, "status": {}})
        assert snapshot.replicas is None
        assert snapshot.ready_replicas == 0

    def test_service_defaults(self):
        snapshot = ServiceSnapshot.from_item({"metadata": {"name": "svc", "namespace": "a"}})
        assert snapshot.type == "ClusterIP"
        assert snapshot.selector == {}

    def test_endpoint_ready_must_be_true(self):
        """Test endpoints without an explicit ready condition count as not ready."""
        snapshot = EndpointSliceSnapshot.from_item(
            {
                "metadata": {"name": "svc-x"},
                "endpoints": [
                    {"addresses": ["10.0.0.1"], "conditions": {"ready": True}},
                    {"addresses": ["10.0.0.2"], "conditions": {}},
                    {"addresses": ["10.0.0.3"]},
                ],
            }
        )
        assert [ep.ready for ep in snapshot.endpoints] == [True, False, False]


@pytest.mark.unit
class TestVerdict:
    def test_ok(self):
        assert Verdict.ok().healthy
        assert Verdict.ok().reason is None

    def test_unhealthy(self):
        verdict = Verdict.unhealthy("Pending")
        assert not verdict.healthy
        assert verdict.reason == "Pending"

    @pytest.mark.parametrize("reason", ["", None])
    def test_unhealthy_requires_reason(self, reason):
        with pytest.raises(ValueError, match="needs a reason"):
            Verdict.unhealthy(reason)


@pytest.mark.unit
class TestAggregateReport:
    def test_total_is_sum_of_kinds(self):
        report = AggregateReport(
            kinds=[KindReport(kind="pods", bad_count=2), KindReport(kind="nodes", bad_count=1)]
        )
        assert report.total_issues == 3
        assert report.bad_count("pods") == 2
        assert report.bad_count("services") == 0

    def test_total_is_serialized(self):
        report = AggregateReport(kinds=[KindReport(kind="pods", bad_count=2)])
        assert report.model_dump(mode="json")["total_issues"] == 2

    def test_report_format_enum(self):
        assert ReportFormat.TEXT == "text"
        assert ReportFormat.JSON == "json"
        assert ReportFormat.YAML == "yaml"
