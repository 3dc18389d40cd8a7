"""Reusable GTK widgets."""
