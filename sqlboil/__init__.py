"""SQL query building, upsert statements, eager loading and test-value helpers."""

__version__ = "2.4.0"