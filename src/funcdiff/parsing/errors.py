"""Declaration extraction error types."""


class ExtractionError(Exception):
    """A file could not be turned into declarations."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot extract declarations from {path}: {reason}")
        self.path = path
        self.reason = reason


class UnsupportedLanguageError(ExtractionError):
    """No language pack handles the file's extension."""

    def __init__(self, path: str) -> None:
        super().__init__(path, "unsupported file type")
