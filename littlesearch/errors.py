"""Exceptions raised by the document and noise-word readers."""

from pathlib import Path


class InputUnavailableError(OSError):
    """A document, document list or noise-word file could not be opened or read."""

    def __init__(self, path: Path | str, reason: str = "could not be read") -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")
