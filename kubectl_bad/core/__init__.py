"""Core business logic: fallback orchestration, output sink and reporting."""
