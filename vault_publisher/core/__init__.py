"""Core components for Vault Publisher."""

from vault_publisher.core.models import (
    ConfigurationError,
    ExportResult,
    ImageOutcome,
    NoteContext,
    NoteSnapshot,
    PublishResult,
    SnapshotResult,
    VaultAsset,
    VaultPublisherError,
)
from vault_publisher.core.debounce import Debouncer
from vault_publisher.core.eligibility import EligibilityFilter
from vault_publisher.core.processor import ContentProcessor
from vault_publisher.core.publisher import Publisher
from vault_publisher.core.snapshot import StartPageExporter
from vault_publisher.core.vault import FileSystemVault, LogNotifier

__all__ = [
    "ConfigurationError",
    "ExportResult",
    "ImageOutcome",
    "NoteContext",
    "NoteSnapshot",
    "PublishResult",
    "SnapshotResult",
    "VaultAsset",
    "VaultPublisherError",
    "Debouncer",
    "EligibilityFilter",
    "ContentProcessor",
    "Publisher",
    "StartPageExporter",
    "FileSystemVault",
    "LogNotifier",
]
