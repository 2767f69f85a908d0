"""Textured grid ray caster for .cub scene files, with an XPM texture reader."""

__version__ = "0.1.0"