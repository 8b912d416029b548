"""Path and polygon analysis: containment, proximity and simplification."""
