"""Config module exports."""

from funcdiff.config.loader import load_config
from funcdiff.config.models import (
    FuncDiffConfig,
    LoggingConfig,
    LogOutputConfig,
    ReportConfig,
    SnapshotConfig,
)

__all__ = [
    "load_config",
    "FuncDiffConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "SnapshotConfig",
    "ReportConfig",
]
