from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class NotifyConfig(BaseModel):
    """SMTP settings for backup notifications."""

    recipient: str = Field(..., description="Address that receives reports.")
    sender: str = Field(..., description="From address of outgoing mail.")
    smtp_host: str = Field(default="localhost", description="SMTP server host.")
    smtp_port: int = Field(default=25, ge=1, le=65535, description="SMTP port.")


class BackupConfig(BaseModel):
    """Configuration for one backup run."""

    source_path: Path = Field(..., description="Live workbook to back up.")
    backup_dir: Path = Field(..., description="Folder holding dated backups.")
    prefix: str = Field(default="tracker", min_length=1, description="Backup name prefix.")
    label: str = Field(
        default="Spreadsheet backup", description="Label used in email subjects."
    )
    notify: NotifyConfig | None = Field(
        default=None, description="Optional email notification settings."
    )
    log_level: str = Field(default="INFO", description="Logging level.")
    log_file: Path | None = Field(default=None, description="Optional log file path.")
