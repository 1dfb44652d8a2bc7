"""Versioned wire contracts."""
