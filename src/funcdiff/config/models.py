"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config() (CLI flags)
2. Environment variables (FUNCDIFF__SECTION__KEY)
3. Repo YAML (.funcdiff/config.yaml)
4. Global YAML (~/.config/funcdiff/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    FUNCDIFF__<SECTION>__<KEY>=<VALUE>

Examples:
    FUNCDIFF__LOGGING__LEVEL=DEBUG
    FUNCDIFF__SNAPSHOT__EXPORTED_ONLY=true
    FUNCDIFF__REPORT__OUT_DIR=reports/funcdiff
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DuplicateKeyPolicy = Literal["disambiguate", "overwrite", "error"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        FUNCDIFF__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every scanned file.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class SnapshotConfig(BaseModel):
    """What goes into a revision's declaration inventory.

    Env vars:
        FUNCDIFF__SNAPSHOT__EXPORTED_ONLY: Only inventory exported declarations
        FUNCDIFF__SNAPSHOT__PACKAGE_FILTER: Substring the package path must contain
        FUNCDIFF__SNAPSHOT__DUPLICATE_KEYS: disambiguate, overwrite or error
        FUNCDIFF__SNAPSHOT__MAX_FILE_SIZE_MB: Skip files larger than this
    """

    exported_only: bool = Field(
        default=False,
        description="Drop non-exported declarations before they are keyed.",
    )
    package_filter: str | None = Field(
        default=None,
        description="Only scan files whose derived package path contains this substring.",
    )
    duplicate_keys: DuplicateKeyPolicy = Field(
        default="disambiguate",
        description="What to do when two declarations share (package, receiver, name). "
        "'disambiguate' tags the later one with its start line, 'overwrite' keeps "
        "the later one, 'error' aborts the run.",
    )
    max_file_size_mb: int = Field(
        default=10,
        ge=1,
        description="Skip files larger than this (MB).",
    )

    @field_validator("package_filter")
    @classmethod
    def empty_filter_is_none(cls, v: str | None) -> str | None:
        return v or None


class ReportConfig(BaseModel):
    """Report rendering configuration.

    Env vars:
        FUNCDIFF__REPORT__SUMMARY_ONLY: Omit per-declaration listings
        FUNCDIFF__REPORT__OUT_DIR: Directory for per-declaration artifacts
        FUNCDIFF__REPORT__IDENTICAL_PREFIX: Filename prefix for identical-body artifacts
        FUNCDIFF__REPORT__FINGERPRINT: Append the ``_report hash:`` line to artifacts
    """

    summary_only: bool = Field(
        default=False,
        description="Only print totals and the per-package table.",
    )
    out_dir: str | None = Field(
        default=None,
        description="Write one Markdown file per changed declaration here.",
    )
    identical_prefix: str = Field(
        default="identical_",
        description="Filename prefix for changed declarations whose bodies are unchanged.",
    )
    fingerprint: bool = Field(
        default=True,
        description="End each artifact with a content hash line.",
    )


class FuncDiffConfig(BaseModel):
    """Root configuration for funcdiff.

    All settings can be configured via:
    1. Environment variables: FUNCDIFF__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    snapshot: SnapshotConfig = Field(default_factory=SnapshotConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
