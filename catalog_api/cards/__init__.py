"""In-memory playing card collection."""
