"""Errors raised while talking to the cluster."""

import re
from typing import Optional

# kubectl renders the API status reason as "Error from server (Forbidden): ..."
_STATUS_REASON = re.compile(r"Error from server \((?P<reason>[A-Za-z]+)\)")

# Last-resort phrases for errors that carry no structured reason
FORBIDDEN_PHRASES = ("forbidden", "Forbidden", "is forbidden")


class K8sError(Exception):
    """Base error for cluster access failures."""


class KubectlNotFoundError(K8sError):
    """kubectl is not installed or not on PATH."""


class K8sAPIError(K8sError):
    """A kubectl call against the API server failed."""

    def __init__(self, message: str, reason: Optional[str] = None):
        super().__init__(message)
        self.reason = reason


class K8sForbiddenError(K8sAPIError):
    """The API server denied the request (RBAC)."""


def parse_status_reason(stderr: str) -> Optional[str]:
    """Extract the Kubernetes status reason from kubectl error output."""
    match = _STATUS_REASON.search(stderr or "")
    if match:
        return match.group("reason")
    return None


def api_error_from_stderr(stderr: str, context: str = "") -> K8sAPIError:
    """Build the matching API error for a failed kubectl call."""
    detail = (stderr or "").strip() or "kubectl exited with an error"
    message = f"{context}: {detail}" if context else detail
    reason = parse_status_reason(detail)
    if reason == "Forbidden":
        return K8sForbiddenError(message, reason=reason)
    return K8sAPIError(message, reason=reason)


def is_forbidden(error: Optional[BaseException]) -> bool:
    """Return True if the error looks like an authorization denial."""
    if error is None:
        return False
    if isinstance(error, K8sForbiddenError):
        return True
    if isinstance(error, K8sAPIError) and error.reason is not None:
        return error.reason == "Forbidden"
    message = str(error)
    return any(phrase in message for phrase in FORBIDDEN_PHRASES)
