"""Thread-safe destination for report lines."""

import threading
from typing import List, Optional

from rich.console import Console

from ..model.report import Finding


class ReportSink:
    """Collects findings and warnings for one section and prints them as lines.

    Writes are serialised so that concurrent namespace checks never interleave
    partial lines. With ``echo=False`` nothing is printed and the collected
    findings are only used for structured output.
    """

    def __init__(self, console: Optional[Console] = None, echo: bool = True):
        self.console = console or Console()
        self.echo = echo
        self.findings: List[Finding] = []
        self.warnings: List[str] = []
        self._lock = threading.Lock()

    def _emit(self, line: str, style: Optional[str] = None) -> None:
        if self.echo:
            self.console.print(
                line, style=style, markup=False, highlight=False, emoji=False, soft_wrap=True
            )

    def line(self, text: str) -> None:
        """Print a plain line (headers, notices)."""
        with self._lock:
            self._emit(text)

    def finding(self, finding: Finding, line: str) -> None:
        """Record an unhealthy resource and print its report line."""
        with self._lock:
            self.findings.append(finding)
            self._emit(line)

    def warning(self, message: str) -> None:
        """Record and print a warning line."""
        with self._lock:
            self.warnings.append(message.strip())
            self._emit(message, style="yellow")
