"""Graph renderers."""
