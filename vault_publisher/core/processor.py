"""Export processor turning a vault note into a site generator post."""

import datetime
import logging
import re
from pathlib import Path
from typing import Callable, Optional

from vault_publisher.core import frontmatter as fm
from vault_publisher.core.eligibility import EligibilityFilter
from vault_publisher.core.models import ExportResult, NoteSnapshot
from vault_publisher.core.vault import AssetResolver, LogNotifier, Notifier
from vault_publisher.images.copier import ImageCopier
from vault_publisher.transforms.frontmatter import (
    add_missing_fields,
    drop_tag_lines,
    fix_aliases,
    identity,
)

logger = logging.getLogger(__name__)


def output_filename(filename: str) -> str:
    """Post filename: whitespace runs become hyphens, then lower-case."""
    return re.sub(r'\s+', '-', filename).lower()


class ContentProcessor:
    """Processes vault notes for the site generator.

    Handles:
    - Eligibility gating (daily notes, optional publish tag)
    - Missing date/title injection
    - Image copying and figure markup
    - Tag line cleanup and alias fixups
    """

    def __init__(
        self,
        resolver: AssetResolver,
        content_dir: Path,
        static_dir: Path,
        eligibility: Optional[EligibilityFilter] = None,
        strip_tag_lines: bool = True,
        today: Optional[Callable[[], datetime.date]] = None,
        notifier: Optional[Notifier] = None,
    ):
        """Initialize ContentProcessor.

        Args:
            resolver: Maps embed references to vault assets
            content_dir: Generator directory receiving posts
            static_dir: Generator directory receiving images
            eligibility: Gate applied before anything is written
            strip_tag_lines: Whether to drop ``tags:`` and indented lines
            today: Clock used for injected dates
            notifier: Receives user-facing notices
        """
        self.content_dir = Path(content_dir)
        self.images = ImageCopier(resolver, static_dir)
        self.eligibility = eligibility or EligibilityFilter()
        self.cleanup = drop_tag_lines() if strip_tag_lines else identity()
        self.today = today
        self.notifier = notifier or LogNotifier()

    def process(self, note: NoteSnapshot) -> ExportResult:
        """Transform a note for export. Images are copied, the post is not written.

        Args:
            note: Snapshot of the note to export

        Returns:
            ExportResult with the final content, or a skip reason
        """
        frontmatter = fm.parse(note.text)

        eligible, reason = self.eligibility.check(note.filename, frontmatter)
        if not eligible:
            logger.info("Skipping %s: %s", note.filename, reason)
            return ExportResult(note=note, reason=reason)

        content = add_missing_fields(note.filename, self.today)(note.text, frontmatter)

        content, outcomes = self.images.process(content)

        content = self.cleanup(content, frontmatter)
        content = fix_aliases()(content, frontmatter)

        return ExportResult(
            note=note,
            destination=self.content_dir / output_filename(note.filename),
            images=outcomes,
            content=content,
        )

    def export(self, note: NoteSnapshot) -> ExportResult:
        """Process a note and write the post into the content directory.

        A failed write is reported, not raised. Images copied before the
        failure stay in place.
        """
        result = self.process(note)
        if result.skipped:
            return result

        try:
            result.destination.write_text(result.content, encoding='utf-8')
        except OSError as e:
            logger.error("Error writing file %s: %s", result.destination, e)
            self.notifier.notify("Failed to write file. Check the log for details.")
            return result

        result.written = True
        logger.info("Exported %s to %s", note.filename, result.destination)
        self.notifier.notify("File and images exported successfully.")
        return result
