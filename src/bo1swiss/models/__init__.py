"""Data models for Bo1 Swiss tournaments."""
