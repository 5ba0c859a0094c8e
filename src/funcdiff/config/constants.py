"""Configuration constants.

Values here are fixed parts of the report format and are NOT user-configurable.
For configurable values, see models.py (SnapshotConfig, ReportConfig).
"""

# =============================================================================
# Report format
# =============================================================================

REPORT_HASH_BYTES = 6
"""Leading SHA-1 bytes shown in an artifact's trailing ``_report hash:`` line."""

NAME_COLLISION_HEX = 8
"""Hex digits of the identity-key digest appended to colliding artifact names."""

ARTIFACT_SUFFIX = ".md"
"""File extension of per-declaration artifacts."""

MAX_NAME_STEM_BYTES = 200
"""Longer artifact name stems are cut to this length and tagged with a key digest.

Leaves room for the collision and ``.md`` suffixes under the common 255-byte
file name limit.
"""

SCRATCH_PREFIX = ".funcdiff-staging-"
"""Prefix of the scratch directory created inside the output directory."""

BODY_UNAVAILABLE = "_function body unavailable_"
"""Placeholder rendered when a declaration body cannot be re-read."""

# =============================================================================
# Defaults shared by the CLI and config models
# =============================================================================

DEFAULT_FROM_REF = "development"
"""Default "from" revision (the side whose declarations count as new)."""

DEFAULT_TO_REF = "master"
"""Default "to" revision."""

CONFIG_DIR_NAME = ".funcdiff"
"""Per-repository configuration directory."""
