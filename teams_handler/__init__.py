"""Sensu handler that posts event notifications to Microsoft Teams."""

__version__ = "0.1.0"
