"""btex reference node: resolution and rendering of cross-references."""
