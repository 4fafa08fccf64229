"""Text transforms applied to notes before export."""
