"""Report-related models."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field


class ReportFormat(str, Enum):
    """Supported report formats."""

    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


class FailureKind(str, Enum):
    """Why a namespace could not be checked during fallback."""

    FORBIDDEN = "forbidden"
    ERROR = "error"


class Finding(BaseModel):
    """One unhealthy resource instance."""

    kind: str
    namespace: Optional[str] = None
    name: str
    reason: str
    extra: Optional[str] = None
    group: Optional[str] = None


class NamespaceOutcome(BaseModel):
    """Result of checking one namespace during per-namespace fallback."""

    namespace: str
    bad_count: int = 0
    failure: Optional[FailureKind] = None
    detail: Optional[str] = None


class KindReport(BaseModel):
    """Outcome of checking one resource kind."""

    kind: str
    bad_count: int = 0
    fell_back: bool = False
    findings: List[Finding] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    namespaces: List[NamespaceOutcome] = Field(default_factory=list)


class AggregateReport(BaseModel):
    """Everything found in one invocation."""

    server_version: Optional[str] = None
    namespace: Optional[str] = None
    kinds: List[KindReport] = Field(default_factory=list)

    @computed_field
    @property
    def total_issues(self) -> int:
        return sum(kind.bad_count for kind in self.kinds)

    def bad_count(self, kind: str) -> int:
        """Bad-count of one kind, 0 if it was not scanned."""
        for report in self.kinds:
            if report.kind == kind:
                return report.bad_count
        return 0
