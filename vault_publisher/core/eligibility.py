"""Eligibility checks deciding whether a note may leave the vault."""

import logging
import re
from pathlib import Path
from typing import Optional, Tuple

from vault_publisher.core.models import Frontmatter

logger = logging.getLogger(__name__)

DAILY_NOTE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')
PUBLISH_TAG = "#publish"


def is_daily_note(filename: str) -> bool:
    """True if the filename, minus its extension, is exactly YYYY-MM-DD."""
    return bool(DAILY_NOTE_PATTERN.match(filename.split('.')[0]))


def has_publish_tag(frontmatter: Optional[Frontmatter], tag: str = PUBLISH_TAG) -> bool:
    if not frontmatter:
        return False
    tags = frontmatter.get('tags')
    return isinstance(tags, list) and tag in tags


class EligibilityFilter:
    """Gate applied before a note is exported or published."""

    def __init__(self, require_publish_tag: bool = True, publish_tag: str = PUBLISH_TAG):
        """Initialize EligibilityFilter.

        Args:
            require_publish_tag: Whether the note must carry the publish tag
            publish_tag: Literal tag token looked for in the ``tags`` list
        """
        self.require_publish_tag = require_publish_tag
        self.publish_tag = publish_tag

    def check(self, filename: str, frontmatter: Optional[Frontmatter]) -> Tuple[bool, str]:
        """Check if a note meets the criteria for this target.

        Args:
            filename: Note filename, with or without extension
            frontmatter: Parsed frontmatter, None if the note has none

        Returns:
            Tuple of (is_eligible, reason)
        """
        name = Path(filename).name
        if is_daily_note(name):
            return False, "daily note"

        if self.require_publish_tag and not has_publish_tag(frontmatter, self.publish_tag):
            return False, f"no {self.publish_tag} tag in frontmatter"

        return True, "OK"

    def is_eligible(self, filename: str, frontmatter: Optional[Frontmatter]) -> bool:
        eligible, reason = self.check(filename, frontmatter)
        if not eligible:
            logger.info("Skipping %s: %s", filename, reason)
        return eligible
