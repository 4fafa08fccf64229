"""Export of the designated start page to a self-contained HTML file."""

import logging
from pathlib import Path
from typing import Optional

from vault_publisher.core.models import NoteSnapshot, SnapshotResult
from vault_publisher.core.vault import LogNotifier, Notifier
from vault_publisher.render.markdown import MarkdownRenderer, rewrite_wikilinks
from vault_publisher.render.page import build_page

logger = logging.getLogger(__name__)


def clean_export_path(path: str) -> Path:
    """Drop literal backslashes, left over from shell-escaped paths."""
    return Path(path.replace('\\', ''))


class StartPageExporter:
    """Renders the start page note to HTML with links back into the vault."""

    def __init__(
        self,
        export_path: str,
        vault_name: str,
        page_name: str = "START",
        script: Optional[str] = None,
        notifier: Optional[Notifier] = None,
    ):
        """Initialize StartPageExporter.

        Args:
            export_path: Destination HTML file as configured by the user
            vault_name: Vault name used in ``obsidian://`` links
            page_name: Note stem this exporter accepts
            script: Optional script added to the page head
            notifier: Receives user-facing notices
        """
        self.export_path = export_path
        self.vault_name = vault_name
        self.page_name = page_name
        self.script = script
        self.notifier = notifier or LogNotifier()
        self.renderer = MarkdownRenderer(vault_name)

    def render(self, note: NoteSnapshot) -> str:
        body = self.renderer.render(rewrite_wikilinks(note.text, self.vault_name))
        return build_page(body, title=self.page_name, script=self.script)

    def export(self, note: NoteSnapshot) -> Optional[SnapshotResult]:
        """Write the rendered start page.

        Returns:
            SnapshotResult, or None if the note is not the start page or no
            export path is configured
        """
        if note.stem != self.page_name:
            self.notifier.notify(f"This command only works on the {self.page_name} page")
            return None

        if not self.export_path:
            self.notifier.notify(f"Please configure the {self.page_name} page export path in settings")
            return None

        destination = clean_export_path(self.export_path)
        result = SnapshotResult(note=note, destination=destination, html=self.render(note))

        try:
            destination.write_text(result.html, encoding='utf-8')
        except OSError as e:
            logger.error("Error exporting %s page to %s: %s", self.page_name, destination, e)
            self.notifier.notify(f"Error exporting {self.page_name} page. Check the log for details.")
            return result

        result.written = True
        self.notifier.notify(f"{self.page_name} page exported successfully")
        return result
