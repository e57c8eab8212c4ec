"""Bundled data files for targetsweep."""
