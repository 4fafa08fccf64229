"""
Vault Publisher - Export and publish notes from a markdown vault

Republishes single notes from a personal vault to:
- A Hugo site (post file plus copied, deduplicated images)
- A remote ingest endpoint (JSON payload)
- A standalone HTML snapshot of the start page
"""

from vault_publisher.core.models import (
    ConfigurationError,
    ExportResult,
    NoteContext,
    NoteSnapshot,
    PublishResult,
    SnapshotResult,
    VaultAsset,
    VaultPublisherError,
)
from vault_publisher.core.processor import ContentProcessor
from vault_publisher.core.publisher import Publisher
from vault_publisher.core.snapshot import StartPageExporter
from vault_publisher.core.vault import FileSystemVault
from vault_publisher.images.copier import ImageCopier
from vault_publisher.render.markdown import MarkdownRenderer

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "ExportResult",
    "NoteContext",
    "NoteSnapshot",
    "PublishResult",
    "SnapshotResult",
    "VaultAsset",
    "VaultPublisherError",
    "ContentProcessor",
    "Publisher",
    "StartPageExporter",
    "FileSystemVault",
    "ImageCopier",
    "MarkdownRenderer",
]
