"""Common exceptions and observability helpers."""
