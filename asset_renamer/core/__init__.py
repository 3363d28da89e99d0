"""Scanning, conflict resolution and rename operations."""
