"""targetsweep - reclaim disk space from Cargo build output directories."""

__version__ = "0.1.0"
