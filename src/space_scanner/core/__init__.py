"""Scanning core: filesystem traversal, errors and configuration."""
