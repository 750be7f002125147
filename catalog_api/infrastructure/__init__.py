"""Infrastructure layer: configuration and MongoDB connection."""
