"""Copy embedded images into the site's static directory.

Embeds like ``![[photo.png]]`` are resolved against the vault, copied next
to the generator's other static assets and replaced with a figure
shortcode. A copy is skipped when a file with the same basename and the
same byte size is already in place.
"""

import logging
import os
import re
import shutil
from pathlib import Path
from typing import List, Optional, Tuple

from vault_publisher.core.models import ImageOutcome
from vault_publisher.core.vault import AssetResolver

logger = logging.getLogger(__name__)


def figure_markup(src: str, caption: str = "") -> str:
    """Build the Hugo figure shortcode for an image."""
    caption = caption.replace('"', '&quot;')
    return f'{{{{<figure src="/{src}" caption="{caption}">}}}}'


def same_size(source: Path, destination: Path) -> bool:
    """True if both files exist and have the same byte size.

    Any stat failure counts as "not the same file".
    """
    try:
        return os.stat(source).st_size == os.stat(destination).st_size
    except OSError:
        return False


class ImageCopier:
    """Resolves image embeds, copies the assets and rewrites the embed lines.

    Handles:
    - Size-based dedup against the static directory
    - Caption lines directly below a standalone embed
    - Partial success: unresolved or failed embeds stay as written
    """

    # Pattern for embeds: ![[photo.png]], ![[assets/photo.png]], ![[shot[1].png]]
    # The reference runs to the first "]]".
    EMBED_PATTERN = re.compile(r'!\[\[((?:(?!\]\]).)+)\]\]')

    def __init__(self, resolver: AssetResolver, static_dir: Path):
        """Initialize ImageCopier.

        Args:
            resolver: Maps embed references to vault assets
            static_dir: Generator static directory receiving the copies
        """
        self.resolver = resolver
        self.static_dir = Path(static_dir)

    def process(self, text: str) -> Tuple[str, List[ImageOutcome]]:
        """Copy every embedded image and replace its embed with figure markup.

        Args:
            text: Note text

        Returns:
            Tuple of (rewritten text, one ImageOutcome per embed)
        """
        lines = text.split('\n')
        output: List[str] = []
        outcomes: List[ImageOutcome] = []

        i = 0
        while i < len(lines):
            line = lines[i]
            standalone = self.EMBED_PATTERN.fullmatch(line.strip())

            if standalone:
                outcome = self.export_asset(standalone.group(1))
                outcomes.append(outcome)
                if not outcome.replaced:
                    output.append(line)
                    i += 1
                    continue

                caption = self.find_caption(lines, i)
                output.append(figure_markup(outcome.destination.name, caption or ""))
                i += 2 if caption is not None else 1
                continue

            def replace(match: re.Match) -> str:
                outcome = self.export_asset(match.group(1))
                outcomes.append(outcome)
                if not outcome.replaced:
                    return match.group(0)
                return figure_markup(outcome.destination.name)

            output.append(self.EMBED_PATTERN.sub(replace, line))
            i += 1

        return '\n'.join(output), outcomes

    def find_caption(self, lines: List[str], index: int) -> Optional[str]:
        """Return the caption for the embed at ``lines[index]``, or None.

        The next line is a caption when it has text, is not another embed,
        and is followed by a blank line. A candidate on the last line of the
        text stays body text.
        """
        if index + 2 >= len(lines):
            return None

        candidate = lines[index + 1]
        if not candidate.strip() or self.EMBED_PATTERN.search(candidate):
            return None

        if lines[index + 2].strip():
            return None

        return candidate.strip()

    def export_asset(self, reference: str) -> ImageOutcome:
        """Resolve one reference and make sure its copy is in place."""
        asset = self.resolver.resolve(reference)
        if asset is None:
            logger.error("Image not found in vault: %s", reference)
            return ImageOutcome(reference, ImageOutcome.MISSING)

        destination = self.static_dir / Path(reference).name

        if same_size(asset.path, destination):
            logger.debug("Image already exported: %s", reference)
            return ImageOutcome(reference, ImageOutcome.SKIPPED, destination)

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(asset.path, destination)
        except OSError as e:
            logger.error("Error copying image %s: %s", reference, e)
            return ImageOutcome(reference, ImageOutcome.FAILED, destination)

        logger.info("Copied image: %s", reference)
        return ImageOutcome(reference, ImageOutcome.COPIED, destination)
