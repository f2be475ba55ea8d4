"""Adapters for external authorities and the content collaborator."""
