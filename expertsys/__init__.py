"""Terminal workspace for writing expert-system rules and facts."""

__version__ = "0.1.0"