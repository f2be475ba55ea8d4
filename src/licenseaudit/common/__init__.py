"""Shared helpers used across adapters and the domain."""
