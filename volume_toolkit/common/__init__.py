"""Shared AWS helpers for the volume toolkit."""
