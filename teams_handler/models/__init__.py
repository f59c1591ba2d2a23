"""Event and card models."""
