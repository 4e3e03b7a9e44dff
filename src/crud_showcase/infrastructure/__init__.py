"""Infrastructure layer: settings and logging."""
