"""Infrastructure layer: entity schema model and SQL rendering."""
