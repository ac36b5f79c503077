"""Core configuration and process-wide helpers."""
