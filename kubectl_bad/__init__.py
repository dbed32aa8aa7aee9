"""kubectl-bad: find bad things in your cluster."""

__version__ = "0.1.0"
