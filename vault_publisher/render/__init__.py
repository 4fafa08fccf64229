"""HTML rendering of notes."""
