"""Cluster-wide checks with a per-namespace fallback on RBAC denial."""

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional

from ..k8s.client import K8sClient
from ..k8s.errors import is_forbidden
from ..k8s.listers import CheckFunc
from ..model.report import FailureKind, NamespaceOutcome
from ..utils.logger import get_logger
from .sink import ReportSink

logger = get_logger(__name__)

# Namespaces queried concurrently when falling back from a cluster-wide list
MAX_PARALLEL_NAMESPACES = 5


class FallbackResult:
    """Bad-count of a check plus how it was obtained."""

    def __init__(
        self,
        count: int,
        outcomes: Optional[List[NamespaceOutcome]] = None,
        fell_back: bool = False,
    ):
        self.count = count
        self.outcomes = outcomes or []
        self.fell_back = fell_back


class FallbackChecker:
    """Runs a check cluster-wide, falling back to one call per namespace.

    When a namespace is pinned the check runs for that namespace only. When the
    cluster-wide call is denied, every namespace is checked on a bounded thread
    pool; forbidden or failing namespaces are reported as warnings and count as
    zero, and every successful namespace's count is kept.
    """

    def __init__(self, client: K8sClient, max_workers: int = MAX_PARALLEL_NAMESPACES):
        self.client = client
        self.max_workers = max_workers

    def run(self, check: CheckFunc, namespace: Optional[str], sink: ReportSink) -> FallbackResult:
        if namespace:
            return FallbackResult(check(self.client, namespace, sink))

        try:
            return FallbackResult(check(self.client, None, sink))
        except Exception as e:
            if not is_forbidden(e):
                raise
            logger.info(f"Cluster-wide listing denied, falling back to namespaces: {e}")

        sink.line("  (cluster-wide access denied, falling back to per-namespace queries)")
        return self._run_per_namespace(check, sink)

    def _run_per_namespace(self, check: CheckFunc, sink: ReportSink) -> FallbackResult:
        # Fatal: without the namespace list there is nothing to fall back to
        namespaces = self.client.list_namespaces()

        total = 0
        total_lock = threading.Lock()
        outcomes: List[NamespaceOutcome] = []

        def check_namespace(namespace: str) -> NamespaceOutcome:
            nonlocal total
            try:
                count = check(self.client, namespace, sink)
            except Exception as e:
                if is_forbidden(e):
                    logger.debug(f"Namespace {namespace} is forbidden")
                    sink.warning(f'  WARNING: cannot access namespace "{namespace}" (forbidden)')
                    return NamespaceOutcome(namespace=namespace, failure=FailureKind.FORBIDDEN)
                logger.debug(f"Checking namespace {namespace} failed: {e}")
                sink.warning(f'  WARNING: error checking namespace "{namespace}": {e}')
                return NamespaceOutcome(
                    namespace=namespace, failure=FailureKind.ERROR, detail=str(e)
                )
            with total_lock:
                total += count
            return NamespaceOutcome(namespace=namespace, bad_count=count)

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [executor.submit(check_namespace, ns) for ns in namespaces]
            for future in as_completed(futures):
                outcomes.append(future.result())

        logger.debug(f"Checked {len(outcomes)} namespaces, {total} issue(s)")
        return FallbackResult(total, outcomes, fell_back=True)
