"""Encoding and validation helpers for brainkey."""
