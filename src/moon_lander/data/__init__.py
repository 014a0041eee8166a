"""Preset landing profiles."""
