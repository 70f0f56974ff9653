"""Filesystem access and deletion."""
