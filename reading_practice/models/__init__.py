"""Data models for read-aloud practice."""
