"""Books API: CRUD service over a books table keyed by ISBN."""

__version__ = "1.0.0"
