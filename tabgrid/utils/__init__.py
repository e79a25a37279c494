"""Shared utilities: logging and events."""
