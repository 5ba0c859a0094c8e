"""funcdiff - function-level diffs between two git revisions."""

__version__ = "0.1.0"
