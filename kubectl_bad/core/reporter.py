"""Cluster health report generator."""

import json
import yaml
from typing import Dict, List, Optional

from rich.console import Console

from ..config import ScanConfig
from ..k8s import K8sClient
from ..k8s.listers import (
    CheckFunc,
    check_deployments,
    check_nodes,
    check_pods,
    check_pvcs,
    check_replicasets,
    check_services,
)
from ..model.report import AggregateReport, KindReport, ReportFormat
from ..utils.logger import get_logger
from .fallback import FallbackChecker
from .sink import ReportSink

logger = get_logger(__name__)

# Every resource kind that can be checked, in canonical report order
ALL_RESOURCE_TYPES: List[str] = [
    "deployments",
    "nodes",
    "pods",
    "pvcs",
    "replicasets",
    "services",
]

SECTION_TITLES: Dict[str, str] = {
    "deployments": "Deployments",
    "nodes": "Nodes",
    "pods": "Pods",
    "pvcs": "PersistentVolumeClaims",
    "replicasets": "ReplicaSets",
    "services": "Services",
}

NAMESPACED_CHECKS: Dict[str, CheckFunc] = {
    "deployments": check_deployments,
    "pods": check_pods,
    "pvcs": check_pvcs,
    "replicasets": check_replicasets,
    "services": check_services,
}


def resolve_resources(args: List[str]) -> List[str]:
    """Validate requested resource types.

    An empty list or "all" selects every type. Names are case-insensitive and
    duplicates are dropped, keeping the first occurrence.
    """
    if not args:
        return list(ALL_RESOURCE_TYPES)

    resolved: List[str] = []
    for arg in args:
        name = arg.lower()
        if name == "all":
            return list(ALL_RESOURCE_TYPES)
        if name not in ALL_RESOURCE_TYPES:
            raise ValueError(
                f'unknown resource type "{arg}" (valid: {", ".join(ALL_RESOURCE_TYPES)})'
            )
        if name not in resolved:
            resolved.append(name)
    return resolved


class HealthReporter:
    """Runs the selected checks and reports what is unhealthy."""

    def __init__(
        self,
        client: K8sClient,
        config: Optional[ScanConfig] = None,
        console: Optional[Console] = None,
        output_format: ReportFormat = ReportFormat.TEXT,
    ):
        self.client = client
        self.config = config or ScanConfig()
        self.console = console or Console()
        self.output_format = output_format
        self.fallback = FallbackChecker(client)

    @property
    def streaming(self) -> bool:
        return self.output_format == ReportFormat.TEXT

    def _print(self, text: str) -> None:
        if self.streaming:
            self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def run(self, resources: List[str], namespace: Optional[str]) -> AggregateReport:
        """Check each resource type in order; namespace None means all namespaces."""
        report = AggregateReport(
            server_version=self.client.get_server_version(), namespace=namespace
        )
        self._print(f"Connected to Kubernetes {report.server_version}")
        self._print(f"Namespace: {namespace}" if namespace else "Namespace: all namespaces")

        for resource in resources:
            self._print(f"\n=== {SECTION_TITLES[resource]} ===")
            kind_report = self._check(resource, namespace)
            logger.info(f"{resource}: {kind_report.bad_count} issue(s)")
            report.kinds.append(kind_report)

        self._print(f"\n{report.total_issues} issue(s) found")
        if not self.streaming:
            self.console.print(
                self.render(report), markup=False, highlight=False, emoji=False, soft_wrap=True
            )
        return report

    def _check(self, resource: str, namespace: Optional[str]) -> KindReport:
        sink = ReportSink(self.console, echo=self.streaming)

        # Nodes are cluster-scoped and never fall back
        if resource == "nodes":
            count = check_nodes(self.client, sink, self.config.node_group_labels)
            return KindReport(
                kind=resource, bad_count=count, findings=sink.findings, warnings=sink.warnings
            )

        result = self.fallback.run(NAMESPACED_CHECKS[resource], namespace, sink)
        return KindReport(
            kind=resource,
            bad_count=result.count,
            fell_back=result.fell_back,
            findings=sink.findings,
            warnings=sink.warnings,
            namespaces=result.outcomes,
        )

    def render(self, report: AggregateReport) -> str:
        """Serialize the report for the structured output formats."""
        data = report.model_dump(mode="json")
        if self.output_format == ReportFormat.YAML:
            return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
        return json.dumps(data, indent=2)
