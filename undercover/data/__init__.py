"""Bundled word dataset."""
