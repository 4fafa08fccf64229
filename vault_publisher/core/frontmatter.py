"""Frontmatter parsing for vault notes.

The parser is a small line classifier rather than a YAML load: notes in the
vault carry loose ``key: value`` blocks that YAML would reject or retype
(``tags: [#publish]`` is a comment to YAML). Every value stays a string or a
list of strings, exactly as written.

Fields are never added by re-serializing the parsed mapping. ``insert_field``
splices a single line after the opening delimiter so the rest of the note is
left byte-for-byte intact.
"""

import re
from typing import List, Optional, Tuple

from vault_publisher.core.models import Frontmatter

FRONTMATTER_PATTERN = re.compile(r'^---\n([\s\S]*?)\n---')
OPENING_DELIMITER = re.compile(r'^---\n')

SCALAR = "scalar"
CONTINUATION = "continuation"


def classify_line(line: str) -> Optional[str]:
    """Decide whether a frontmatter line assigns a key or continues a list.

    Returns:
        SCALAR for ``key: value`` lines, CONTINUATION for ``- item`` lines,
        None for anything else (blank lines, stray text)
    """
    if ':' in line:
        return SCALAR
    if line.strip().startswith('-'):
        return CONTINUATION
    return None


def parse_value(raw: str):
    """Parse the text after a key's colon into a string or a list.

    A bracketed value is always a list, even with a single element:
    ``[#publish]`` -> ``['#publish']``.
    """
    value = raw.strip()
    if value.startswith('[') and value.endswith(']'):
        return [item.strip() for item in value[1:-1].split(',')]
    return value


def split_scalar(line: str) -> Tuple[str, str]:
    key, _, rest = line.partition(':')
    return key.strip(), rest


def parse(text: str) -> Optional[Frontmatter]:
    """Parse the leading frontmatter block of a note.

    Args:
        text: Full note text

    Returns:
        Mapping of key to string or list of strings, or None if the text
        does not start with a ``---`` delimited block
    """
    match = FRONTMATTER_PATTERN.match(text)
    if not match:
        return None

    frontmatter: Frontmatter = {}
    current_key = ""

    for line in match.group(1).split('\n'):
        kind = classify_line(line)

        if kind == SCALAR:
            current_key, raw = split_scalar(line)
            frontmatter[current_key] = parse_value(raw)

        elif kind == CONTINUATION and current_key:
            existing = frontmatter.get(current_key)
            items: List[str] = existing if isinstance(existing, list) else []
            items.append(line.strip()[1:].strip())
            frontmatter[current_key] = items

    return frontmatter


def has_field(frontmatter: Optional[Frontmatter], key: str) -> bool:
    """True if the field is present with a non-empty value."""
    return bool(frontmatter and frontmatter.get(key))


def insert_field(text: str, key: str, value: str) -> str:
    """Insert ``key: value`` right after the opening ``---`` line.

    Text without an opening delimiter is returned unchanged.
    """
    return OPENING_DELIMITER.sub(
        lambda m: f"---\n{key}: {value}\n", text, count=1
    )


def fill_field(text: str, key: str, value: str) -> str:
    """Give every empty ``key:`` line in the frontmatter block a value.

    Only the leading block is touched; body lines are left as written.
    """
    match = FRONTMATTER_PATTERN.match(text)
    if not match:
        return text

    empty_line = re.compile(rf'^{re.escape(key)}[ \t]*:[ \t]*$', re.MULTILINE)
    block = empty_line.sub(lambda m: f"{key}: {value}", match.group(1))
    return text[:match.start(1)] + block + text[match.end(1):]


def set_missing_field(text: str, frontmatter: Optional[Frontmatter], key: str, value: str) -> str:
    """Add ``key: value`` unless the field already has a value.

    A key written with an empty value is filled in on its own line so the
    block never carries the key twice. An absent key is inserted after the
    opening delimiter.
    """
    if has_field(frontmatter, key):
        return text
    if frontmatter is not None and key in frontmatter:
        return fill_field(text, key, value)
    return insert_field(text, key, value)
