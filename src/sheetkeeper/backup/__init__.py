"""Daily backup flow built around the comparison engine."""

from __future__ import annotations

from .config import BackupConfig, NotifyConfig
from .runner import BackupOutcome, build_report, report_failure, run_backup

__all__ = [
    "BackupConfig",
    "BackupOutcome",
    "NotifyConfig",
    "build_report",
    "report_failure",
    "run_backup",
]
