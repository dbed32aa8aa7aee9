"""Data models for kubectl-bad."""

from .kubernetes import K8sResource, OwnerReference
from .report import (
    AggregateReport,
    FailureKind,
    Finding,
    KindReport,
    NamespaceOutcome,
    ReportFormat,
)
from .verdict import Verdict

__all__ = [
    "K8sResource",
    "OwnerReference",
    "AggregateReport",
    "FailureKind",
    "Finding",
    "KindReport",
    "NamespaceOutcome",
    "ReportFormat",
    "Verdict",
]
