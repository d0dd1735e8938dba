from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .backup import BackupConfig, NotifyConfig, report_failure, run_backup

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Run the backup entrypoint.

    Args:
        argv: Optional CLI arguments for testing.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    config, force = _parse_args(argv)
    _configure_logging(config)
    try:
        run_backup(config, force=force)
    except Exception as exc:
        report_failure(config, exc)
        return 1
    return 0


def _parse_args(argv: list[str] | None) -> tuple[BackupConfig, bool]:
    """Parse CLI arguments into a backup config and the force flag.

    Args:
        argv: Optional CLI argument list.

    Returns:
        Parsed configuration and whether the backup is forced.
    """
    parser = argparse.ArgumentParser(
        description="Back up a workbook and report what changed since the last backup."
    )
    parser.add_argument("--source", type=Path, required=True, help="Live workbook.")
    parser.add_argument(
        "--backup-dir", type=Path, required=True, help="Folder holding backups."
    )
    parser.add_argument("--prefix", default="tracker", help="Backup name prefix.")
    parser.add_argument(
        "--label", default="Spreadsheet backup", help="Label used in email subjects."
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Write a backup even if one already exists for today.",
    )
    parser.add_argument("--recipient", help="Email address that receives reports.")
    parser.add_argument("--sender", help="From address for report emails.")
    parser.add_argument("--smtp-host", default="localhost", help="SMTP server host.")
    parser.add_argument("--smtp-port", type=int, default=25, help="SMTP server port.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )
    parser.add_argument("--log-file", type=Path, help="Optional log file path.")
    args = parser.parse_args(argv)

    notify: NotifyConfig | None = None
    if args.recipient:
        notify = NotifyConfig(
            recipient=args.recipient,
            sender=args.sender or args.recipient,
            smtp_host=args.smtp_host,
            smtp_port=args.smtp_port,
        )
    config = BackupConfig(
        source_path=args.source,
        backup_dir=args.backup_dir,
        prefix=args.prefix,
        label=args.label,
        notify=notify,
        log_level=args.log_level,
        log_file=args.log_file,
    )
    return config, bool(args.force)


def _configure_logging(config: BackupConfig) -> None:
    """Configure logging for the backup process.

    Args:
        config: Backup configuration.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.log_file is not None:
        handlers.append(logging.FileHandler(config.log_file))
    logging.basicConfig(
        level=config.log_level.upper(),
        handlers=handlers,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
