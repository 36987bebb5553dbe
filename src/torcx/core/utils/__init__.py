"""Shared helpers for the torcx core."""
