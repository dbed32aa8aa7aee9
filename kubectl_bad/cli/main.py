"""Main CLI interface using Typer."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..config import ConfigError, ScanConfig
from ..core.reporter import ALL_RESOURCE_TYPES, HealthReporter, resolve_resources
from ..k8s import K8sClient, K8sError
from ..model.report import ReportFormat
from ..utils.logger import get_logger, set_verbosity

app = typer.Typer(
    name="kubectl-bad",
    help="A kubectl plugin to find bad things in your cluster",
    add_completion=True,
)

console = Console()
logger = get_logger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"kubectl-bad {__version__}")
        raise typer.Exit()


def resolve_namespace(
    client: K8sClient, namespace: Optional[str], all_namespaces: bool
) -> Optional[str]:
    """Pick the namespace to scan; None means all namespaces."""
    if all_namespaces:
        return None
    if namespace:
        return namespace
    return client.current_namespace() or "default"


@app.command()
def bad(
    resources: Optional[List[str]] = typer.Argument(
        None,
        help=f"Resource types to check ({', '.join(ALL_RESOURCE_TYPES)}) or 'all' (default: all)",
    ),
    all_namespaces: bool = typer.Option(
        False, "--all-namespaces", "-A", help="If true, list across all namespaces"
    ),
    namespace: Optional[str] = typer.Option(
        None, "--namespace", "-n", help="Namespace to check (default: from kubeconfig context)"
    ),
    context: Optional[str] = typer.Option(
        None, "--context", help="Kubernetes context to use"
    ),
    kubeconfig: Optional[str] = typer.Option(
        None, "--kubeconfig", help="Path to the kubeconfig file"
    ),
    request_timeout: Optional[str] = typer.Option(
        None, "--request-timeout", help="Per-request timeout passed to kubectl (e.g. 30s)"
    ),
    format: ReportFormat = typer.Option(
        ReportFormat.TEXT, "--format", "-f", help="Output format for the report"
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", help="YAML or JSON scan configuration file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """Find unhealthy pods, nodes, deployments, replicasets, services and PVCs.

    Unhealthy resources do not change the exit status; only errors that stop
    the scan do.
    """
    set_verbosity(verbose)
    try:
        selected = resolve_resources(resources or [])
        config = ScanConfig.load(config_path)

        client = K8sClient(
            context=context,
            kubeconfig=kubeconfig,
            request_timeout=request_timeout or config.request_timeout,
            kubectl=config.kubectl_binary,
        )
        target = resolve_namespace(client, namespace, all_namespaces)

        reporter = HealthReporter(client, config=config, console=console, output_format=format)
        reporter.run(selected, target)

    except (K8sError, ConfigError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
