"""Kubernetes resource models."""

from typing import Dict, Any, Optional, List
from pydantic import BaseModel, Field


class OwnerReference(BaseModel):
    """Reference from a resource to the object that owns it."""

    kind: str = ""
    name: str = ""
    controller: bool = False


class K8sResource(BaseModel):
    """Kubernetes resource as returned by the API."""

    api_version: str = ""
    kind: str = ""
    metadata: Dict[str, Any] = Field(default_factory=dict)
    spec: Optional[Dict[str, Any]] = None
    status: Optional[Dict[str, Any]] = None

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "K8sResource":
        """Wrap one item of a kubectl list response."""
        return cls(
            api_version=item.get("apiVersion", ""),
            kind=item.get("kind", ""),
            metadata=item.get("metadata") or {},
            spec=item.get("spec"),
            status=item.get("status"),
        )

    @property
    def name(self) -> str:
        """Get resource name."""
        return self.metadata.get("name", "")

    @property
    def namespace(self) -> Optional[str]:
        """Get resource namespace."""
        return self.metadata.get("namespace")

    @property
    def labels(self) -> Dict[str, str]:
        """Get resource labels."""
        return self.metadata.get("labels") or {}

    @property
    def owner_references(self) -> List[OwnerReference]:
        """Get the resource's owner references."""
        return [
            OwnerReference(
                kind=ref.get("kind", ""),
                name=ref.get("name", ""),
                controller=bool(ref.get("controller")),
            )
            for ref in self.metadata.get("ownerReferences") or []
        ]

    @property
    def spec_dict(self) -> Dict[str, Any]:
        return self.spec or {}

    @property
    def status_dict(self) -> Dict[str, Any]:
        return self.status or {}
