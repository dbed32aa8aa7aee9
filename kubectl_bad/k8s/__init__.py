"""Kubernetes interaction module."""

from .client import K8sClient
from .errors import K8sAPIError, K8sError, K8sForbiddenError, KubectlNotFoundError

__all__ = ["K8sClient", "K8sAPIError", "K8sError", "K8sForbiddenError", "KubectlNotFoundError"]
