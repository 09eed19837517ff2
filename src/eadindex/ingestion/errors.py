"""Domain errors raised while reading and extracting finding aids."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True)
class IngestionError(Exception):
    """Domain error for unreadable or unusable finding-aid sources."""

    path: Path | None
    message: str

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message} (path={self.path})"


@dataclass(slots=True)
class ParseError(IngestionError):
    """Raised when a finding aid cannot be parsed as XML."""

    line: int | None = None

    def __str__(self) -> str:
        location = f" at line {self.line}" if self.line is not None else ""
        if self.path is None:
            return f"{self.message}{location}"
        return f"{self.message}{location} (path={self.path})"
