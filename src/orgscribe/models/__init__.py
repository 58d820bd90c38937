"""Data models for orgscribe."""
