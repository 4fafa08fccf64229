"""Frontmatter transform factories for Vault Publisher.

These factories create transform functions that edit the raw note text
ahead of export. Each one works on the text directly, never on a parsed
and reprinted mapping, and each one is a no-op when its edit is already
present.
"""

import datetime
import re
from typing import Callable, Optional

from vault_publisher.core import frontmatter as fm
from vault_publisher.core.models import Frontmatter

TextTransform = Callable[[str, Optional[Frontmatter]], str]

ALIASES_QUOTES = re.compile(r"^(aliases:.*)'(.*)'", re.MULTILINE)


def filename_to_title(filename: str) -> str:
    """Derive a title from a note filename.

    Drops a trailing ``.md`` and turns every hyphen and underscore into a
    space. Case and repeated separators are left alone.
    """
    title = re.sub(r'\.md$', '', filename)
    return re.sub(r'[-_]', ' ', title)


def identity() -> TextTransform:
    """Create a pass-through transform that returns the text unchanged."""
    def transform(text: str, frontmatter: Optional[Frontmatter]) -> str:
        return text
    return transform


def add_date(today: Optional[Callable[[], datetime.date]] = None) -> TextTransform:
    """Create a transform that adds ``date:`` when the note has none.

    Args:
        today: Clock returning the local date; defaults to date.today

    Returns:
        A transform function (text, frontmatter) -> text
    """
    clock = today or datetime.date.today

    def transform(text: str, frontmatter: Optional[Frontmatter]) -> str:
        return fm.set_missing_field(text, frontmatter, 'date', clock().strftime('%Y-%m-%d'))
    return transform


def add_title(filename: str) -> TextTransform:
    """Create a transform that adds ``title:`` derived from the filename."""
    def transform(text: str, frontmatter: Optional[Frontmatter]) -> str:
        return fm.set_missing_field(text, frontmatter, 'title', filename_to_title(filename))
    return transform


def rename_legacy_aliases() -> TextTransform:
    """Create a transform renaming the first ``hugoAliases:`` to ``aliases:``."""
    def transform(text: str, frontmatter: Optional[Frontmatter]) -> str:
        if not frontmatter or 'hugoAliases' not in frontmatter:
            return text
        return text.replace('hugoAliases:', 'aliases:', 1)
    return transform


def unquote_aliases() -> TextTransform:
    """Create a transform dropping one pair of single quotes on ``aliases:`` lines."""
    def transform(text: str, frontmatter: Optional[Frontmatter]) -> str:
        return ALIASES_QUOTES.sub(r'\1\2', text)
    return transform


def drop_tag_lines() -> TextTransform:
    """Create a transform removing ``tags:`` lines and two-space indented lines.

    Applies to the whole text, so indented body lines go too.
    """
    def transform(text: str, frontmatter: Optional[Frontmatter]) -> str:
        lines = text.split('\n')
        return '\n'.join(
            line for line in lines
            if not line.startswith('tags:') and not line.startswith('  ')
        )
    return transform


def compose(*transforms: TextTransform) -> TextTransform:
    """Chain transforms left to right over the same frontmatter snapshot."""
    def transform(text: str, frontmatter: Optional[Frontmatter]) -> str:
        for step in transforms:
            text = step(text, frontmatter)
        return text
    return transform


def add_missing_fields(filename: str, today: Optional[Callable[[], datetime.date]] = None) -> TextTransform:
    """Create a transform adding whichever of ``date:`` and ``title:`` is missing."""
    return compose(add_date(today), add_title(filename))


def fix_aliases() -> TextTransform:
    """Create a transform applying both alias fixups."""
    return compose(rename_legacy_aliases(), unquote_aliases())
