"""Localized static-site gateway with maintenance mode for the ISAM website."""

__version__ = "0.1.0"
