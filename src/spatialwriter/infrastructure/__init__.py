"""Infrastructure layer: packaged reference data and its loader."""
