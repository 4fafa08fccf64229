"""Image handling for exported notes."""
