"""Kubernetes client wrapper."""

import subprocess
import json
from typing import List, Tuple, Optional, Dict, Any

from ..utils.logger import get_logger
from .errors import K8sAPIError, KubectlNotFoundError, api_error_from_stderr

logger = get_logger(__name__)


class K8sClient:
    """Wrapper for kubectl commands."""

    def __init__(
        self,
        context: Optional[str] = None,
        kubeconfig: Optional[str] = None,
        request_timeout: Optional[str] = None,
        kubectl: str = "kubectl",
    ):
        self.context = context
        self.kubeconfig = kubeconfig
        self.request_timeout = request_timeout
        self.kubectl = kubectl
        self._verify_kubectl()

    def _verify_kubectl(self):
        """Verify kubectl is available and configured."""
        try:
            subprocess.run(
                [self.kubectl, "version", "--client", "-o", "json"],
                capture_output=True,
                text=True,
                check=True,
            )
            logger.debug("kubectl verified successfully")
        except FileNotFoundError:
            raise KubectlNotFoundError("kubectl command not found. Please install kubectl.")
        except subprocess.CalledProcessError:
            logger.warning("kubectl verification failed")

    def _build_command(self, args: List[str]) -> List[str]:
        """Build kubectl command with kubeconfig, context and timeout."""
        cmd = [self.kubectl]

        if self.kubeconfig:
            cmd.extend(["--kubeconfig", self.kubeconfig])

        if self.context:
            cmd.extend(["--context", self.context])

        if self.request_timeout:
            cmd.extend(["--request-timeout", self.request_timeout])

        cmd.extend(args)
        return cmd

    def execute(self, args: List[str]) -> Tuple[bool, str]:
        """Execute kubectl command and return success status and output."""
        cmd = self._build_command(args)
        logger.debug(f"Executing: {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=True)
            return True, result.stdout
        except subprocess.CalledProcessError as e:
            logger.debug(f"Command failed: {e.stderr}")
            return False, e.stderr or ""

    def _run_json(self, args: List[str], context: str) -> Dict[str, Any]:
        success, output = self.execute(args)
        if not success:
            raise api_error_from_stderr(output, context)
        try:
            return json.loads(output)
        except json.JSONDecodeError:
            raise K8sAPIError(f"{context}: failed to parse kubectl output")

    def get_json(
        self,
        resource_type: str,
        namespace: Optional[str] = None,
        all_namespaces: bool = False,
        label_selector: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Get resource(s) as JSON, raising K8sAPIError on failure."""
        args = ["get", resource_type]

        if all_namespaces:
            args.append("--all-namespaces")
        elif namespace:
            args.extend(["-n", namespace])

        if label_selector:
            args.extend(["-l", label_selector])

        args.extend(["-o", "json"])
        return self._run_json(args, f"listing {resource_type}")

    def list_items(
        self,
        resource_type: str,
        namespace: Optional[str] = None,
        label_selector: Optional[str] = None,
        namespaced: bool = True,
    ) -> List[Dict[str, Any]]:
        """List items of a resource type; namespace None means all namespaces."""
        data = self.get_json(
            resource_type,
            namespace=namespace,
            all_namespaces=namespaced and namespace is None,
            label_selector=label_selector,
        )
        return data.get("items") or []

    def list_namespaces(self) -> List[str]:
        """Get the names of all namespaces visible to the caller."""
        items = self.list_items("namespaces", namespaced=False)
        return [item.get("metadata", {}).get("name", "") for item in items]

    def get_version(self) -> Dict[str, Any]:
        """Get cluster version information."""
        return self._run_json(["version", "-o", "json"], "getting server version")

    def get_server_version(self) -> str:
        """Get the API server's git version string."""
        server = self.get_version().get("serverVersion") or {}
        return server.get("gitVersion", "unknown")

    def current_namespace(self) -> Optional[str]:
        """Get the namespace configured for the active kubeconfig context."""
        config = self._run_json(["config", "view", "--minify", "-o", "json"], "reading kubeconfig")
        for entry in config.get("contexts") or []:
            namespace = (entry.get("context") or {}).get("namespace")
            if namespace:
                return namespace
        return None
