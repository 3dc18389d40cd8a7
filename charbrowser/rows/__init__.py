"""List rows."""
