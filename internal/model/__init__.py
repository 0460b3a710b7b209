"""Shared constants for the pre-compressor service."""
