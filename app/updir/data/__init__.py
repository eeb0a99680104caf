"""Bundled data files for updir."""
