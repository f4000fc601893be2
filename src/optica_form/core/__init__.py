"""Core enumerations, region lookup and shared helpers."""
