"""AI marketing copy and banner generator."""

__version__ = "1.0.0"
