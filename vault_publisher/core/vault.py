"""Filesystem view of a vault: note lookup and embed asset resolution."""

import glob
import logging
from pathlib import Path
from typing import Optional, Protocol

from vault_publisher.core.models import NoteContext, VaultAsset

logger = logging.getLogger(__name__)


class AssetResolver(Protocol):
    def resolve(self, reference: str) -> Optional[VaultAsset]:
        ...


class Notifier(Protocol):
    def notify(self, message: str) -> None:
        ...


class LogNotifier:
    """Notifier that sends user-facing notices to the log."""

    def notify(self, message: str) -> None:
        logger.info(message)


class FileSystemVault:
    """Resolves notes and embedded assets inside a vault directory."""

    def __init__(self, root: Path):
        """Initialize FileSystemVault.

        Args:
            root: Path to the vault root
        """
        self.root = Path(root)

    @property
    def name(self) -> str:
        return self.root.resolve().name

    def contains(self, path: Path) -> bool:
        """True if ``path`` resolves to a location under the vault root."""
        try:
            Path(path).resolve().relative_to(self.root.resolve())
        except ValueError:
            return False
        return True

    def resolve(self, reference: str) -> Optional[VaultAsset]:
        """Resolve an embed reference to an asset in the vault.

        Exact vault-relative paths win. Otherwise the first file (in sorted
        path order) with the same basename anywhere in the vault is used,
        which is how short embed links like ``![[photo.png]]`` behave.

        Args:
            reference: Text inside ``![[...]]``

        Returns:
            VaultAsset, or None if nothing matches inside the vault
        """
        candidate = self.root / reference
        if not (candidate.is_file() and self.contains(candidate)):
            basename = Path(reference).name
            if basename in ("", ".", ".."):
                return None
            matches = sorted(
                p for p in self.root.rglob(glob.escape(basename)) if p.is_file() and self.contains(p)
            )
            if not matches:
                logger.debug("No asset inside the vault for: %s", reference)
                return None
            candidate = matches[0]

        return VaultAsset(
            reference=reference,
            path=candidate,
            size=candidate.stat().st_size,
        )

    def note(self, name_or_path: str) -> Optional[NoteContext]:
        """Find a note by path, filename (with or without .md), or stem.

        Returns:
            NoteContext if found, None otherwise
        """
        path = Path(name_or_path)
        if path.is_file():
            return NoteContext(path=path)

        relative = self.root / name_or_path
        if relative.is_file():
            return NoteContext(path=relative)

        filename = f"{path.stem}.md"
        for note_path in sorted(self.root.rglob(glob.escape(filename))):
            if note_path.is_file():
                return NoteContext(path=note_path)

        return None
