"""Data models for Vault Publisher."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

Frontmatter = Dict[str, Union[str, List[str]]]


class VaultPublisherError(Exception):
    """Base error for Vault Publisher."""


class ConfigurationError(VaultPublisherError):
    """A setting required by an operation is missing or invalid."""


@dataclass(frozen=True)
class NoteSnapshot:
    """Full text of a note captured at the moment a command fires.

    Later edits to the file are invisible to the pipeline holding this.
    """
    path: Path
    text: str

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def stem(self) -> str:
        return self.path.stem


@dataclass
class NoteContext:
    """Cheapest possible note reference - just location.

    Content is only read when a snapshot is taken.
    """
    path: Path

    def read_raw(self) -> str:
        """Read file contents on demand."""
        return self.path.read_text(encoding='utf-8')

    def snapshot(self) -> NoteSnapshot:
        return NoteSnapshot(path=self.path, text=self.read_raw())


@dataclass(frozen=True)
class VaultAsset:
    """A file resolved from an embed reference."""
    reference: str
    path: Path
    size: int


@dataclass
class ImageOutcome:
    """What happened to one embed reference during export."""
    COPIED = "copied"
    SKIPPED = "skipped"
    MISSING = "missing"
    FAILED = "failed"

    reference: str
    status: str
    destination: Optional[Path] = None

    @property
    def replaced(self) -> bool:
        """True if the embed was swapped for figure markup."""
        return self.status in (self.COPIED, self.SKIPPED)


@dataclass
class ExportResult:
    """Result of exporting one note to the site generator."""
    note: NoteSnapshot
    destination: Optional[Path] = None
    written: bool = False
    reason: Optional[str] = None
    images: List[ImageOutcome] = field(default_factory=list)
    content: str = ""

    @property
    def skipped(self) -> bool:
        return self.reason is not None


@dataclass
class PublishResult:
    """Result of posting one note to the publish endpoint."""
    note: NoteSnapshot
    payload: Dict[str, Union[int, str]]
    status_code: int


@dataclass
class SnapshotResult:
    """Result of rendering the start page to a standalone HTML file."""
    note: NoteSnapshot
    destination: Path
    html: str
    written: bool = False
