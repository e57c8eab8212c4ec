"""Core infrastructure for targetsweep: theming and logging setup."""
