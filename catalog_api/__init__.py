"""Catalog API: product catalog service with sample-data fallback."""
