"""Character browser: paginated, searchable character catalog front-end."""

__version__ = "0.1.0"
